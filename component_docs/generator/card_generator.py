"""Render a single example card from the card template and a content fragment."""

from __future__ import annotations

import asyncio
import typing as typ
from html import escape

from component_docs._constants import CARD_TEMPLATE_NAME
from component_docs.dom import hide, inner_html, parse_document, set_inner_html

if typ.TYPE_CHECKING:
    from pathlib import Path

    from bs4 import Tag

    from component_docs.config import CardEntry
    from component_docs.dom import DocumentTree


class CardGenerator:
    """Merge content fragments into fresh copies of ``card_template.html``."""

    def __init__(self, templates_dir: Path) -> None:
        self.template_path = templates_dir / CARD_TEMPLATE_NAME

    async def generate(self, card: CardEntry, docs_path: Path) -> Tag:
        """Return a detached card element populated from ``card``.

        Parameters
        ----------
        card : CardEntry
            Title, subtitle, and content fragment filename of the card.
        docs_path : Path
            Documentation folder that ``card.contents`` is relative to.

        Returns
        -------
        Tag
            The card template's root element, removed from its own document
            so the caller can append it elsewhere.

        Raises
        ------
        OSError
            If the template or the content fragment cannot be read.
        TemplateSlotError
            If the card template lacks one of its fixed slots.
        """
        template_html, contents_html = await asyncio.gather(
            asyncio.to_thread(self.template_path.read_text, encoding="utf-8"),
            asyncio.to_thread((docs_path / card.contents).read_text, encoding="utf-8"),
        )
        card_tree = parse_document(template_html)
        contents = parse_document(contents_html)

        set_inner_html(card_tree.require("h4.card-title"), card.title)
        set_inner_html(card_tree.require("h6.card-subtitle"), card.subtitle)
        _fill_example(card_tree, contents)
        _fill_additional_info(card_tree, contents)
        return card_tree.root_element().extract()


def _fill_example(card_tree: DocumentTree, contents: DocumentTree) -> None:
    """Copy preview and escaped markup, or hide the example when either is absent."""
    preview = contents.element_by_id("preview")
    markup = contents.element_by_id("markup")
    if preview is None or markup is None:
        hide(card_tree.require("div.example-container"))
        return

    set_inner_html(card_tree.require("div.example-preview"), inner_html(preview))
    markup_container = card_tree.require("div.example-markup")
    code_slot = markup_container.find("code") or markup_container
    set_inner_html(code_slot, escape(inner_html(markup), quote=True))


def _fill_additional_info(card_tree: DocumentTree, contents: DocumentTree) -> None:
    info = contents.element_by_id("additional_info")
    if info is not None:
        set_inner_html(card_tree.require("div#additional_info"), inner_html(info))


__all__ = ["CardGenerator"]
