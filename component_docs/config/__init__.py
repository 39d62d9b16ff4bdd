"""Run settings and documentation folder models for component_docs builds.

This subpackage defines the frozen :class:`RunConfig` shared by every build
component, the msgspec structs decoded from each ``docs/configuration.json``
(:class:`DocConfig`, :class:`CardEntry`), and the loaders that merge YAML
defaults with CLI overrides.

Examples
--------
>>> from component_docs.config import load_run_config
>>> run = load_run_config(overrides={"src_path": "packages"})  # doctest: +SKIP
>>> run.src_path  # doctest: +SKIP
PosixPath('packages')
"""

from .loader import DEFAULT_CONFIG_FILE, decode_doc_config, load_run_config
from .models import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_TEMPLATES_DIR,
    BuildReport,
    CardEntry,
    DocConfig,
    RunConfig,
)

__all__ = [
    "DEFAULT_ASSETS_DIR",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_TEMPLATES_DIR",
    "BuildReport",
    "CardEntry",
    "DocConfig",
    "RunConfig",
    "decode_doc_config",
    "load_run_config",
]
