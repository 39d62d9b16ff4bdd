"""Cyclopts CLI entrypoint for building the component documentation website.

The ``component-docs`` console script defined here empties the destination
folder, copies the site assets and the compiled project script, scans the
source tree for ``docs/configuration.json`` files, and writes one HTML page
per discovered component. Options may come from the command line, from
``INPUT_*`` environment variables, or from a ``component-docs.yaml`` defaults
file.

Examples
--------
Build the site for the default ``src`` tree into ``docs``:

>>> from component_docs.cli import main
>>> main()  # doctest: +SKIP

Use the camelCase flags of older build scripts:

>>> from component_docs.cli import app
>>> app(
...     ["--srcPath", "packages", "--projectName", "Acme UI"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import build_site
from .config import load_run_config
from .logging import configure_logging

app = App(name="component-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the documentation website from docs folders.")
def generate(
    *,
    dest_docs_path: typ.Annotated[
        Path | None,
        Parameter(
            name=["--dest-docs-path", "--destDocsPath"],
            help="Output website folder (emptied first)",
            env_var="INPUT_DEST_DOCS_PATH",
        ),
    ] = None,
    script_path: typ.Annotated[
        Path | None,
        Parameter(
            name=["--script-path", "--scriptPath"],
            help="Compiled project script to embed as js/app.min.js",
            env_var="INPUT_SCRIPT_PATH",
        ),
    ] = None,
    src_path: typ.Annotated[
        Path | None,
        Parameter(
            name=["--src-path", "--srcPath"],
            help="Source root scanned for docs folders",
            env_var="INPUT_SRC_PATH",
        ),
    ] = None,
    project_name: typ.Annotated[
        str | None,
        Parameter(
            name=["--project-name", "--projectName"],
            help="Project name shown in titles and headers",
            env_var="INPUT_PROJECT_NAME",
        ),
    ] = None,
    templates_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Folder holding page and card templates",
            env_var="INPUT_TEMPLATES_DIR",
        ),
    ] = None,
    assets_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Static assets copied into the site", env_var="INPUT_ASSETS_DIR"
        ),
    ] = None,
    max_concurrency: typ.Annotated[
        int | None,
        Parameter(
            help="Bound on pages generated at once",
            env_var="INPUT_MAX_CONCURRENCY",
        ),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="YAML file with default options", env_var="INPUT_CONFIG"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log every discovery and write", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Build the documentation website.

    Parameters
    ----------
    dest_docs_path : Path or None, optional
        Output folder; defaults to ``docs``. Everything inside it is deleted.
    script_path : Path or None, optional
        Compiled script copied to ``js/app.min.js``; defaults to
        ``dist/app.min.js``.
    src_path : Path or None, optional
        Folder scanned for ``docs`` subfolders; defaults to ``src``.
    project_name : str or None, optional
        Display name used in page titles and the header link.
    templates_dir : Path or None, optional
        Override for the bundled ``page_template.html``/``card_template.html``.
    assets_dir : Path or None, optional
        Override for the bundled static site assets.
    max_concurrency : int or None, optional
        Limit on simultaneously generated pages; unbounded when ``None``.
    config : Path or None, optional
        YAML defaults file; ``component-docs.yaml`` is used when present.
    verbose : bool, optional
        Emit DEBUG logging.

    Returns
    -------
    None
        Writes the website and prints each generated page path. Page and
        asset failures are logged without changing the exit status.

    Raises
    ------
    ConfigScanError
        If a documentation folder's configuration cannot be loaded.
    RunConfigError
        If the defaults file or an option value is invalid.
    """
    configure_logging(verbose=verbose)
    run_config = load_run_config(
        config,
        overrides={
            "dest_docs_path": dest_docs_path,
            "script_path": script_path,
            "src_path": src_path,
            "project_name": project_name,
            "templates_dir": templates_dir,
            "assets_dir": assets_dir,
            "max_concurrency": max_concurrency,
        },
    )
    report = build_site(run_config)
    for path in report.written:
        print(f"wrote {_format_path(path)}")


app.default(generate)


def main() -> None:
    """Invoke the Cyclopts application behind the ``component-docs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
