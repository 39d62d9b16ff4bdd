"""Build the cross-page navigation menu inside a page template."""

from __future__ import annotations

import typing as typ
from html import escape

from component_docs._constants import (
    ACTIVE_NAV_CLASS,
    MENU_ID_TEMPLATE,
    PAGE_FILENAME_TEMPLATE,
    TAG_NAME_CLASS,
)
from component_docs.dom import append_class, parse_fragment

if typ.TYPE_CHECKING:
    from component_docs.config import DocConfig
    from component_docs.dom import DocumentTree


def tag_label(config: DocConfig) -> str:
    """Return ``<title> <code>&lt;tag&gt;</code>`` markup for ``config``."""
    return (
        f'{config.title} <code class="{TAG_NAME_CLASS}">'
        f"&lt;{config.tag_name}&gt;</code>"
    )


def nav_item_html(config: DocConfig, *, active: bool) -> str:
    """Return the ``<li>`` markup linking to the page generated for ``config``."""
    item_id = escape(config.id, quote=True)
    href = escape(PAGE_FILENAME_TEMPLATE.format(id=config.id), quote=True)
    css_class = ACTIVE_NAV_CLASS if active else ""
    return (
        f'<li id="{item_id}" class="{css_class}">'
        f'<a href="{href}">{tag_label(config)}</a></li>'
    )


def render_navigation(
    tree: DocumentTree,
    configs: typ.Sequence[DocConfig],
    index: int,
) -> None:
    """Populate every category submenu and mark the current page active.

    Parameters
    ----------
    tree : DocumentTree
        Freshly parsed page template.
    configs : Sequence[DocConfig]
        Every discovered configuration, in scan order. Each one contributes a
        menu item to ``ul#{category}_menu`` for its own category.
    index : int
        Position of the page being rendered within ``configs``; only that
        item carries the active marker, and its category's top-level
        ``li#{category}`` is marked active as well.

    Raises
    ------
    TemplateSlotError
        If the template lacks a category submenu or the current category item.
    """
    for position, config in enumerate(configs):
        menu = tree.require_id(MENU_ID_TEMPLATE.format(category=config.category), "ul")
        for node in parse_fragment(nav_item_html(config, active=position == index)):
            menu.append(node)

    current = configs[index]
    append_class(tree.require_id(current.category, "li"), ACTIVE_NAV_CLASS)


__all__ = ["nav_item_html", "render_navigation", "tag_label"]
