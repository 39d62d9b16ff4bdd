"""Common literal values used across component_docs.

These constants keep filenames, selectors, and class names centralized so the
scanner, generators, templates, and tests can import the same values without
drifting. Intended for internal use within the component_docs package.

Examples
--------
>>> from component_docs import _constants
>>> _constants.MENU_ID_TEMPLATE.format(category="components")
'components_menu'
>>> _constants.PAGE_FILENAME_TEMPLATE.format(id="widget")
'widget.html'
"""

DOCS_FOLDER_NAME = "docs"
CONFIG_FILENAME = "configuration.json"

PAGE_TEMPLATE_NAME = "page_template.html"
CARD_TEMPLATE_NAME = "card_template.html"

PAGE_FILENAME_TEMPLATE = "{id}.html"
MENU_ID_TEMPLATE = "{category}_menu"
SCRIPT_DEST_PARTS = ("js", "app.min.js")

ACTIVE_NAV_CLASS = "navigation__sub--active"
TAG_NAME_CLASS = "info-tag-name"
