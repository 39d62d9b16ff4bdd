"""Discover documentation folders beneath a project's source tree.

A documentation folder is any directory named ``docs`` (case-insensitive)
holding a ``configuration.json``. :func:`scan_for_docs` walks the tree,
decodes each configuration into a :class:`~component_docs.config.DocConfig`,
attaches the folder path, and returns the flattened list in directory-entry
order. Entries without an ``id`` are dropped.

Sibling directories are scanned concurrently; filesystem calls are awaited
through :func:`asyncio.to_thread` so the event loop never blocks on disk.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import msgspec

from ._constants import CONFIG_FILENAME, DOCS_FOLDER_NAME
from .config import DocConfig, decode_doc_config
from .errors import ConfigScanError
from .logging import get_logger

logger = get_logger("scanner")


async def scan_for_docs(root_dir: Path) -> list[DocConfig]:
    """Return every documentation configuration found under ``root_dir``.

    Parameters
    ----------
    root_dir : Path
        Directory to walk recursively. Symbolic links are not followed.

    Returns
    -------
    list[DocConfig]
        Configurations with a non-empty ``id``, in the concatenation order of
        the recursive walk (entries within a directory are visited by name).

    Raises
    ------
    ConfigScanError
        If ``root_dir`` cannot be listed, or a ``docs`` folder holds a missing
        ``configuration.json`` or one that is not valid JSON. The scan has no
        per-folder isolation, so one bad folder aborts the whole run.
    """
    found = await _scan_folder(root_dir.resolve())
    return [config for config in found if config.id]


async def _scan_folder(folder: Path) -> list[DocConfig]:
    entries = await asyncio.to_thread(_list_subdirectories, folder)
    branches = await asyncio.gather(*(_scan_entry(entry) for entry in entries))
    return [config for branch in branches for config in branch]


async def _scan_entry(entry: Path) -> list[DocConfig]:
    if entry.name.lower() == DOCS_FOLDER_NAME:
        return [await read_doc_config(entry)]
    return await _scan_folder(entry)


def _list_subdirectories(folder: Path) -> list[Path]:
    """Return the directories directly inside ``folder``, sorted by name."""
    try:
        with os.scandir(folder) as it:
            names = sorted(
                entry.name for entry in it if entry.is_dir(follow_symlinks=False)
            )
    except OSError as exc:
        msg = f"Unable to list '{folder}': {exc}"
        raise ConfigScanError(msg) from exc
    return [folder / name for name in names]


async def read_doc_config(docs_folder: Path) -> DocConfig:
    """Read and decode ``configuration.json`` inside ``docs_folder``.

    Raises
    ------
    ConfigScanError
        If the file is missing, unreadable, or not valid JSON. Wrongly typed
        fields are tolerated by
        :func:`~component_docs.config.decode_doc_config`.
    """
    config_path = docs_folder / CONFIG_FILENAME
    try:
        payload = await asyncio.to_thread(config_path.read_bytes)
        config = decode_doc_config(payload, docs_path=docs_folder)
    except (OSError, msgspec.DecodeError) as exc:
        msg = f"Unable to load '{config_path}': {exc}"
        raise ConfigScanError(msg) from exc
    logger.debug("discovered %s (id=%r)", docs_folder, config.id)
    return config


__all__ = ["read_doc_config", "scan_for_docs"]
