"""Unit tests for the BeautifulSoup-backed document tree adapter."""

from __future__ import annotations

import pytest

from component_docs.dom import (
    append_class,
    has_class,
    hide,
    inner_html,
    parse_document,
    set_inner_html,
)
from component_docs.errors import TemplateSlotError

PAGE = (
    "<!DOCTYPE html><html><head></head><body>"
    '<div id="box" class="a"><p>old</p></div><ul id="2col"></ul>'
    "</body></html>"
)


def test_require_raises_for_missing_selector() -> None:
    tree = parse_document(PAGE)
    with pytest.raises(TemplateSlotError, match="div#missing"):
        tree.require("div#missing")


def test_element_by_id_handles_non_css_identifiers() -> None:
    tree = parse_document(PAGE)
    node = tree.element_by_id("2col", "ul")
    assert node is not None
    assert node.name == "ul"
    assert tree.element_by_id("2col", "div") is None


def test_set_inner_html_replaces_children() -> None:
    tree = parse_document(PAGE)
    node = tree.require("div#box")
    set_inner_html(node, "<em>new</em> text")
    assert inner_html(node) == "<em>new</em> text"


def test_title_is_created_inside_head_when_missing() -> None:
    tree = parse_document(PAGE)
    tree.title = "Acme - Widget <my-widget>"
    assert tree.title == "Acme - Widget <my-widget>"
    head = tree.require("head")
    assert head.title is not None
    assert "<title>Acme - Widget &lt;my-widget&gt;</title>" in tree.serialize()


def test_serialize_keeps_doctype() -> None:
    assert parse_document(PAGE).serialize().startswith("<!DOCTYPE html>")


def test_append_class_is_idempotent() -> None:
    tree = parse_document(PAGE)
    node = tree.require("div#box")
    append_class(node, "active")
    append_class(node, "active")
    assert node["class"] == ["a", "active"]
    assert has_class(node, "active")


def test_hide_appends_display_none_to_existing_style() -> None:
    tree = parse_document('<div style="color: red">x</div>')
    node = tree.require("div")
    hide(node)
    assert node["style"] == "color: red; display: none;"


def test_root_element_skips_leading_whitespace() -> None:
    tree = parse_document("\n<div class='card'><h4></h4></div>\n")
    root = tree.root_element()
    assert root.name == "div"
    assert has_class(root, "card")


def test_root_element_requires_an_element() -> None:
    with pytest.raises(TemplateSlotError):
        parse_document("just text").root_element()
