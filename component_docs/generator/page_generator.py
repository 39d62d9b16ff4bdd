"""Assemble one documentation page per discovered configuration.

:class:`PageGenerator` parses a fresh copy of ``page_template.html`` for every
page, fills in the project header, the shared navigation menu, the content
title block, and one card per configured example, then writes
``{dest_docs_path}/{id}.html``.

Example
-------
>>> import asyncio
>>> from component_docs.config import RunConfig
>>> from component_docs.scanner import scan_for_docs
>>> run = RunConfig(project_name="Acme UI")
>>> configs = asyncio.run(scan_for_docs(run.src_path))  # doctest: +SKIP
>>> generator = PageGenerator(run)
>>> asyncio.run(generator.generate(configs[0], configs, 0))  # doctest: +SKIP
PosixPath('docs/widget.html')
"""

from __future__ import annotations

import asyncio
import typing as typ

from component_docs._constants import PAGE_FILENAME_TEMPLATE, PAGE_TEMPLATE_NAME
from component_docs.dom import parse_document, set_inner_html
from component_docs.logging import get_logger

from .card_generator import CardGenerator
from .navigation import render_navigation, tag_label

if typ.TYPE_CHECKING:
    from pathlib import Path

    from component_docs.config import DocConfig, RunConfig
    from component_docs.dom import DocumentTree

logger = get_logger("pages")


class PageGenerator:
    """Render and write HTML pages for documentation configurations."""

    def __init__(
        self, run_config: RunConfig, *, card_generator: CardGenerator | None = None
    ) -> None:
        """Initialize the generator from the run settings.

        Parameters
        ----------
        run_config : RunConfig
            Supplies the project name, template directory, and output folder.
        card_generator : CardGenerator, optional
            Card renderer; defaults to one reading the same template directory.
        """
        self.run_config = run_config
        self.template_path = run_config.templates_dir / PAGE_TEMPLATE_NAME
        self.cards = card_generator or CardGenerator(run_config.templates_dir)

    async def publish(
        self, config: DocConfig, configs: typ.Sequence[DocConfig], index: int
    ) -> Path | None:
        """Generate a page, logging and swallowing any failure.

        Returns
        -------
        Path | None
            The written file, or ``None`` when generation failed. Sibling pages
            are unaffected by a failure here.
        """
        try:
            return await self.generate(config, configs, index)
        except Exception:  # noqa: BLE001 - one bad page must not stop the batch
            logger.exception(
                "failed to generate page %r from %s", config.id, config.docs_path
            )
            return None

    async def generate(
        self, config: DocConfig, configs: typ.Sequence[DocConfig], index: int
    ) -> Path:
        """Render the page for ``config`` and write it to the output folder.

        Parameters
        ----------
        config : DocConfig
            Configuration of the page being rendered.
        configs : Sequence[DocConfig]
            Every discovered configuration; drives the navigation menu.
        index : int
            Position of ``config`` within ``configs``.

        Returns
        -------
        Path
            Path of the written ``{id}.html`` file.

        Raises
        ------
        OSError
            If a template, content fragment, or the output file cannot be
            accessed.
        TemplateSlotError
            If a template lacks one of the elements filled in here.
        """
        template_html = await asyncio.to_thread(
            self.template_path.read_text, encoding="utf-8"
        )
        tree = parse_document(template_html)
        self._fill_header(tree, config)
        render_navigation(tree, configs, index)
        self._fill_content_title(tree, config)
        await self._fill_cards(tree, config)
        return await self._write(tree, config)

    def _fill_header(self, tree: DocumentTree, config: DocConfig) -> None:
        project_name = self.run_config.project_name
        tree.title = f"{project_name} - {config.title} <{config.tag_name}>"
        set_inner_html(
            tree.require("a#main_header_link"), f"{project_name} Documentation"
        )

    @staticmethod
    def _fill_content_title(tree: DocumentTree, config: DocConfig) -> None:
        set_inner_html(tree.require("h1#content_title"), tag_label(config))
        set_inner_html(tree.require("small#content_subtitle"), config.subtitle)

    async def _fill_cards(self, tree: DocumentTree, config: DocConfig) -> None:
        """Append one card per entry, preserving the declared order."""
        container = tree.require("div#cards_container")
        cards = await asyncio.gather(
            *(self.cards.generate(card, config.folder) for card in config.cards)
        )
        for card in cards:
            container.append(card)

    async def _write(self, tree: DocumentTree, config: DocConfig) -> Path:
        out_dir = self.run_config.dest_docs_path
        output_path = out_dir / PAGE_FILENAME_TEMPLATE.format(id=config.id)
        html = tree.serialize()
        await asyncio.to_thread(out_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(output_path.write_text, html, encoding="utf-8")
        logger.debug("wrote %s", output_path)
        return output_path


__all__ = ["PageGenerator"]
