"""Exception hierarchy shared by the component_docs build pipeline."""

from __future__ import annotations


class ComponentDocsError(Exception):
    """Base class for errors raised while building the documentation site."""


class RunConfigError(ComponentDocsError, ValueError):
    """Raised when run settings (CLI options or YAML defaults) are invalid."""


class ConfigScanError(ComponentDocsError):
    """Raised when a documentation folder cannot be discovered or decoded."""


class TemplateSlotError(ComponentDocsError):
    """Raised when a template lacks an element the generators fill in."""


__all__ = [
    "ComponentDocsError",
    "ConfigScanError",
    "RunConfigError",
    "TemplateSlotError",
]
