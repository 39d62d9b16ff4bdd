"""Typed structures describing run settings and documentation folders."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import msgspec

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
DEFAULT_ASSETS_DIR = PACKAGE_ROOT / "site_assets"


@dc.dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable settings for one documentation build.

    Attributes
    ----------
    dest_docs_path : Path
        Output website directory. Its contents are deleted at the start of
        every run.
    script_path : Path
        Compiled project script copied to ``js/app.min.js``.
    src_path : Path
        Project source root scanned for ``docs`` folders.
    project_name : str or None
        Display name used in page titles and the main header.
    templates_dir : Path
        Directory holding ``page_template.html`` and ``card_template.html``.
    assets_dir : Path
        Static site assets copied verbatim into ``dest_docs_path``.
    max_concurrency : int or None
        Upper bound on simultaneously generated pages; ``None`` issues every
        page at once.
    """

    dest_docs_path: Path = Path("docs")
    script_path: Path = Path("dist/app.min.js")
    src_path: Path = Path("src")
    project_name: str | None = None
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    assets_dir: Path = DEFAULT_ASSETS_DIR
    max_concurrency: int | None = None


class CardEntry(msgspec.Struct, frozen=True):
    """One example card declared in ``configuration.json``."""

    title: str = ""
    subtitle: str = ""
    contents: str = ""


class DocConfig(msgspec.Struct, frozen=True):
    """A documentation folder's ``configuration.json`` plus its location.

    ``docs_path`` is attached by the scanner after decoding; any ``docsPath``
    value in the file itself is replaced.
    """

    id: str = ""
    title: str = ""
    tag_name: str = msgspec.field(default="", name="tagName")
    subtitle: str = ""
    category: str = ""
    cards: list[CardEntry] = []
    docs_path: str = msgspec.field(default="", name="docsPath")

    @property
    def folder(self) -> Path:
        """Return ``docs_path`` as a :class:`~pathlib.Path`."""
        return Path(self.docs_path)


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a documentation build."""

    assets_published: bool = False
    written: list[Path] = dc.field(default_factory=list)
    failures: dict[str, str] = dc.field(default_factory=dict)
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        """Return ``True`` when assets were copied and every page was written."""
        return self.assets_published and not self.failures


__all__ = [
    "DEFAULT_ASSETS_DIR",
    "DEFAULT_TEMPLATES_DIR",
    "BuildReport",
    "CardEntry",
    "DocConfig",
    "RunConfig",
]
