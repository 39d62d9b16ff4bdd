"""Shared fixtures for component_docs tests.

The fixtures build throwaway project trees under ``tmp_path``: a ``src``
folder with ``docs`` subfolders, a compiled script file, and a
:class:`RunConfig` pointing the build at them while keeping the bundled
templates and site assets.
"""

from __future__ import annotations

import logging
import typing as typ

import pytest

from component_docs.config import RunConfig
from tests._fixtures.project_tree import (
    BASIC_FRAGMENT,
    widget_config,
    write_docs_folder,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _propagating_package_logger() -> typ.Iterator[None]:
    """Undo ``configure_logging`` so ``caplog`` sees package records."""
    logger = logging.getLogger("component_docs")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Return an empty project source folder."""
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def script_file(tmp_path: Path) -> Path:
    """Return a stand-in compiled project script."""
    path = tmp_path / "dist" / "app.min.js"
    path.parent.mkdir(parents=True)
    path.write_text("console.log('app');\n", encoding="utf-8")
    return path


@pytest.fixture
def run_config(tmp_path: Path, src_dir: Path, script_file: Path) -> RunConfig:
    """Return run settings targeting the temporary project tree."""
    return RunConfig(
        dest_docs_path=tmp_path / "site",
        script_path=script_file,
        src_path=src_dir,
        project_name="Acme UI",
    )


@pytest.fixture
def widget_docs(src_dir: Path) -> Path:
    """Create the sample widget documentation folder and return it."""
    return write_docs_folder(
        src_dir / "widgets", widget_config(), {"basic.html": BASIC_FRAGMENT}
    )
