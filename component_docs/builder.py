"""Top-level orchestration of a documentation website build.

:class:`SiteBuilder` publishes the static assets, scans the source tree for
documentation folders, and then generates every page as one unordered batch
(all issued, all awaited). Asset and page failures are logged and recorded in
the returned :class:`~component_docs.config.BuildReport`; a scan failure
propagates and aborts the build.

Typical usage:

>>> from component_docs.config import RunConfig
>>> from component_docs.builder import build_site
>>> report = build_site(RunConfig(project_name="Acme UI"))  # doctest: +SKIP
>>> report.written  # doctest: +SKIP
[PosixPath('docs/widget.html')]
"""

from __future__ import annotations

import asyncio
import time
import typing as typ

from .assets import publish_assets
from .config import BuildReport
from .generator import PageGenerator
from .logging import get_logger
from .scanner import scan_for_docs

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import DocConfig, RunConfig

logger = get_logger("builder")


class SiteBuilder:
    """Run the asset, scan, and page generation stages for one build."""

    def __init__(
        self, run_config: RunConfig, *, page_generator: PageGenerator | None = None
    ) -> None:
        self.run_config = run_config
        self.pages = page_generator or PageGenerator(run_config)

    async def run(self) -> BuildReport:
        """Build the website and return a summary of what was written.

        Raises
        ------
        ConfigScanError
            If documentation discovery fails; no pages are generated then.
        """
        started = time.perf_counter()
        report = BuildReport()
        if self.run_config.project_name is None:
            logger.warning("no project name configured; titles will read 'None'")

        report.assets_published = await publish_assets(
            self.run_config.dest_docs_path,
            self.run_config.assets_dir,
            self.run_config.script_path,
        )
        logger.info("copy docs assets ---> [done]")

        configs = await scan_for_docs(self.run_config.src_path)
        results = await self._publish_pages(configs)
        for config, written in zip(configs, results, strict=True):
            if written is None:
                report.failures[config.id] = str(config.docs_path)
            else:
                report.written.append(written)
        logger.info("generate docs pages ---> [done]")

        report.elapsed_ms = round((time.perf_counter() - started) * 1000)
        logger.info("Finished in %dms", report.elapsed_ms)
        return report

    async def _publish_pages(
        self, configs: list[DocConfig]
    ) -> list[Path | None]:
        limit = self.run_config.max_concurrency
        semaphore = asyncio.Semaphore(limit) if limit else None

        async def _one(index: int, config: DocConfig) -> Path | None:
            if semaphore is None:
                return await self.pages.publish(config, configs, index)
            async with semaphore:
                return await self.pages.publish(config, configs, index)

        return list(
            await asyncio.gather(
                *(_one(index, config) for index, config in enumerate(configs))
            )
        )


def build_site(run_config: RunConfig) -> BuildReport:
    """Run :class:`SiteBuilder` to completion on a fresh event loop."""
    return asyncio.run(SiteBuilder(run_config).run())


__all__ = ["SiteBuilder", "build_site"]
