"""Static documentation website generator for UI component libraries.

The package walks a project's source tree for ``docs`` folders, turns each
folder's ``configuration.json`` and HTML content fragments into a page built
from shared templates, and publishes the result alongside the site assets.

Exports
-------
- ``app``: Cyclopts application behind the ``component-docs`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_site``: Run a full build for a :class:`RunConfig`.

Examples
--------
>>> from component_docs import build_site
>>> from component_docs.config import RunConfig
>>> build_site(RunConfig(project_name="Acme UI"))  # doctest: +SKIP
BuildReport(assets_published=True, ...)
"""

from __future__ import annotations

from .builder import build_site
from .cli import app, main

__all__ = ["app", "build_site", "main"]
