"""Narrow document-tree interface over BeautifulSoup.

The generators never touch BeautifulSoup directly: they parse templates and
content fragments into a :class:`DocumentTree`, look nodes up by CSS selector
or id, swap inner HTML, and serialize the result. Keeping the surface this
small means the page and card generators read like DOM scripts while the
parser backend stays an implementation detail.

Examples
--------
>>> tree = parse_document("<html><head></head><body><p id='x'>a</p></body></html>")
>>> node = tree.require("p#x")
>>> set_inner_html(node, "<b>b</b>")
>>> inner_html(node)
'<b>b</b>'
>>> tree.title = "Docs"
>>> "<title>Docs</title>" in tree.serialize()
True
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

from .errors import TemplateSlotError

PARSER = "html.parser"


class DocumentTree:
    """A parsed, mutable HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    def query(self, selector: str) -> Tag | None:
        """Return the first element matching ``selector`` or ``None``."""
        return self.soup.select_one(selector)

    def require(self, selector: str) -> Tag:
        """Return the first element matching ``selector``.

        Raises
        ------
        TemplateSlotError
            If no element matches.
        """
        node = self.query(selector)
        if node is None:
            msg = f"Template has no element matching '{selector}'."
            raise TemplateSlotError(msg)
        return node

    def element_by_id(self, element_id: str, tag: str | None = None) -> Tag | None:
        """Return the first element whose ``id`` equals ``element_id``.

        Lookup by attribute rather than selector keeps ids that are not valid
        CSS identifiers (``2col``, ``a.b``) addressable.
        """
        found = self.soup.find(tag or True, id=element_id)
        return found if isinstance(found, Tag) else None

    def require_id(self, element_id: str, tag: str | None = None) -> Tag:
        """Return the element with ``element_id``, raising when absent."""
        node = self.element_by_id(element_id, tag)
        if node is None:
            label = f"{tag}#{element_id}" if tag else f"#{element_id}"
            msg = f"Template has no element matching '{label}'."
            raise TemplateSlotError(msg)
        return node

    @property
    def title(self) -> str:
        """Return the document title text (empty when there is no ``<title>``)."""
        node = self.soup.title
        return node.get_text() if node is not None else ""

    @title.setter
    def title(self, value: str) -> None:
        node = self.soup.title
        if node is None:
            node = self.soup.new_tag("title")
            head = self.soup.head
            if head is not None:
                head.append(node)
            else:
                self.soup.insert(0, node)
        node.string = value

    def root_element(self) -> Tag:
        """Return the first element of the body (or of the document).

        Raises
        ------
        TemplateSlotError
            If the document holds no elements at all.
        """
        container = self.soup.body or self.soup
        for child in container.children:
            if isinstance(child, Tag):
                return child
        msg = "Template contains no root element."
        raise TemplateSlotError(msg)

    def serialize(self) -> str:
        """Return the document as an HTML string."""
        return self.soup.decode()


def parse_document(html: str | bytes) -> DocumentTree:
    """Parse ``html`` into a fresh :class:`DocumentTree`."""
    return DocumentTree(BeautifulSoup(html, PARSER))


def parse_fragment(html: str) -> list[PageElement]:
    """Parse an HTML fragment and return its detached top-level nodes."""
    soup = BeautifulSoup(html, PARSER)
    return [child.extract() for child in list(soup.contents)]


def inner_html(node: Tag) -> str:
    """Return the serialized children of ``node``."""
    return node.decode_contents()


def set_inner_html(node: Tag, html: str) -> None:
    """Replace the children of ``node`` with the parsed ``html`` fragment."""
    node.clear()
    for child in parse_fragment(html):
        node.append(child)


def _class_list(node: Tag) -> list[str]:
    current = node.get("class") or []
    return current.split() if isinstance(current, str) else list(current)


def has_class(node: Tag, class_name: str) -> bool:
    """Return ``True`` when ``node`` carries ``class_name``."""
    return class_name in _class_list(node)


def append_class(node: Tag, class_name: str) -> None:
    """Add ``class_name`` to the class list of ``node`` if not already present."""
    if has_class(node, class_name):
        return
    node["class"] = [*_class_list(node), class_name]


def hide(node: Tag) -> None:
    """Hide ``node`` by appending ``display: none;`` to its inline style."""
    existing = str(node.get("style") or "").strip()
    if existing and not existing.endswith(";"):
        existing = f"{existing};"
    node["style"] = f"{existing} display: none;".strip()


__all__ = [
    "DocumentTree",
    "append_class",
    "has_class",
    "hide",
    "inner_html",
    "parse_document",
    "parse_fragment",
    "set_inner_html",
]
