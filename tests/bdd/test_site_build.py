"""Behaviour tests for building a component documentation site.

These pytest-bdd scenarios drive the whole pipeline through ``build_site``
using the ``site_build.feature`` file: a temporary ``src`` tree with a widget
documentation folder is turned into ``{id}.html`` pages next to the bundled
site assets, and the resulting HTML is inspected with BeautifulSoup.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` after installing the test
extra (``pip install -e .[test]``). No network access is required.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from component_docs.builder import build_site
from component_docs.config import RunConfig
from tests._fixtures.project_tree import (
    BASIC_FRAGMENT,
    widget_config,
    write_docs_folder,
)

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _widget_soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    dest: Path = scenario_state["dest"]  # type: ignore[assignment]
    html = (dest / "widget.html").read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("a project with a widget docs folder")
def given_widget_project(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Lay out ``src/widgets/docs`` with the widget configuration and fragment."""
    src = tmp_path / "src"
    write_docs_folder(src / "widgets", widget_config(), {"basic.html": BASIC_FRAGMENT})
    script = tmp_path / "dist" / "app.min.js"
    script.parent.mkdir(parents=True)
    script.write_text("/* app */\n", encoding="utf-8")
    scenario_state["src"] = src
    scenario_state["dest"] = tmp_path / "docs"
    scenario_state["script"] = script


@given("the output folder holds stale files")
def given_stale_output(scenario_state: dict[str, object]) -> None:
    """Seed the destination with files the build must remove."""
    dest: Path = scenario_state["dest"]  # type: ignore[assignment]
    (dest / "legacy").mkdir(parents=True)
    (dest / "legacy" / "old.html").write_text("old", encoding="utf-8")
    (dest / "stale.html").write_text("stale", encoding="utf-8")


@given("a docs folder whose configuration has no id")
def given_anonymous_docs(scenario_state: dict[str, object]) -> None:
    """Add a docs folder lacking an ``id`` field."""
    src: Path = scenario_state["src"]  # type: ignore[assignment]
    payload = widget_config()
    del payload["id"]
    write_docs_folder(src / "anonymous", payload, {"basic.html": BASIC_FRAGMENT})


@when("I build the documentation site")
def when_build(scenario_state: dict[str, object]) -> None:
    """Run a full build into the scenario's destination folder."""
    scenario_state["report"] = build_site(
        RunConfig(
            dest_docs_path=scenario_state["dest"],  # type: ignore[arg-type]
            script_path=scenario_state["script"],  # type: ignore[arg-type]
            src_path=scenario_state["src"],  # type: ignore[arg-type]
            project_name="Acme UI",
        )
    )


@then("the widget page is written with the project title")
def then_widget_title(scenario_state: dict[str, object]) -> None:
    """Verify the page title combines project name, title, and tag name."""
    soup = _widget_soup(scenario_state)
    assert soup.title is not None, "expected a <title> element"
    assert soup.title.get_text() == "Acme UI - Widget <my-widget>", (
        f"unexpected title {soup.title.get_text()!r}"
    )


@then("the widget page shows one card with a visible preview")
def then_widget_card(scenario_state: dict[str, object]) -> None:
    """Verify a single card titled "Basic" whose preview renders "Hi"."""
    soup = _widget_soup(scenario_state)
    cards = soup.select("div#cards_container > div.card")
    assert len(cards) == 1, f"expected one card, found {len(cards)}"
    card = cards[0]
    assert card.select_one("h4.card-title").get_text() == "Basic"
    assert "style" not in card.select_one("div.example-container").attrs, (
        "example container should stay visible"
    )
    assert card.select_one("div.example-preview").get_text() == "Hi"


@then("the card markup is shown as escaped text")
def then_escaped_markup(scenario_state: dict[str, object]) -> None:
    """Verify the markup slot holds ``&lt;b&gt;Hi&lt;/b&gt;`` in the HTML source."""
    soup = _widget_soup(scenario_state)
    code = soup.select_one("div.example-markup code")
    assert code is not None, "expected a code slot in the example markup"
    assert code.decode_contents() == "&lt;b&gt;Hi&lt;/b&gt;"


@then("the stale files are gone")
def then_stale_removed(scenario_state: dict[str, object]) -> None:
    """Verify the destination was emptied before publishing."""
    dest: Path = scenario_state["dest"]  # type: ignore[assignment]
    assert not (dest / "stale.html").exists()
    assert not (dest / "legacy").exists()
    assert (dest / "js" / "app.min.js").is_file()
    assert (dest / "css" / "site.css").is_file()


@then("only the widget page is written")
def then_only_widget(scenario_state: dict[str, object]) -> None:
    """Verify the id-less folder produced no page."""
    dest: Path = scenario_state["dest"]  # type: ignore[assignment]
    assert sorted(path.name for path in dest.glob("*.html")) == ["widget.html"]
