"""Publish static site assets and the compiled project script.

The destination directory is emptied first (anything already there is
permanently lost), then the bundled or configured assets are copied in,
followed by the project script at ``js/app.min.js``. Failures are logged and
reported through the return value; they never abort the build.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ._constants import SCRIPT_DEST_PARTS
from .logging import get_logger

logger = get_logger("assets")


async def publish_assets(dest_dir: Path, assets_dir: Path, script_path: Path) -> bool:
    """Replace ``dest_dir`` contents with site assets and the project script.

    Parameters
    ----------
    dest_dir : Path
        Output website directory; created when absent.
    assets_dir : Path
        Directory copied recursively into ``dest_dir``.
    script_path : Path
        Compiled script copied to ``dest_dir/js/app.min.js``.

    Returns
    -------
    bool
        ``True`` when every step succeeded. On an ``OSError`` the error is
        logged, the remaining steps are skipped, and ``False`` is returned;
        steps already completed are not rolled back.
    """
    try:
        await asyncio.to_thread(empty_dir, dest_dir)
        await asyncio.to_thread(
            shutil.copytree, assets_dir, dest_dir, dirs_exist_ok=True
        )
        await asyncio.to_thread(_copy_script, script_path, dest_dir)
    except OSError:
        logger.exception("failed to publish site assets into %s", dest_dir)
        return False
    return True


def empty_dir(path: Path) -> None:
    """Delete everything inside ``path``, creating the directory if needed."""
    path.mkdir(parents=True, exist_ok=True)
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def _copy_script(script_path: Path, dest_dir: Path) -> None:
    target = dest_dir.joinpath(*SCRIPT_DEST_PARTS)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(script_path, target)


__all__ = ["empty_dir", "publish_assets"]
