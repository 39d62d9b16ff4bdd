"""Page, card, and navigation rendering for component documentation."""

from .card_generator import CardGenerator
from .navigation import nav_item_html, render_navigation
from .page_generator import PageGenerator

__all__ = [
    "CardGenerator",
    "PageGenerator",
    "nav_item_html",
    "render_navigation",
]
