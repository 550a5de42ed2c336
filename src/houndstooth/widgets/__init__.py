"""
Built-in widgets: specification factories and widget state logic.
"""

from houndstooth.widgets.catalog import (
    CATALOG,
    CatalogEntry,
    build_catalog,
    list_catalog,
    modifier_class_name,
    register_catalog,
)
from houndstooth.widgets.state import (
    ExpansionMode,
    accordion_section_expanded,
    ensure_label,
    mark_current_item,
    toggle_accordion_section,
    toggle_disclosure,
    toggle_pressed,
)

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "build_catalog",
    "list_catalog",
    "modifier_class_name",
    "register_catalog",
    "ExpansionMode",
    "accordion_section_expanded",
    "ensure_label",
    "mark_current_item",
    "toggle_accordion_section",
    "toggle_disclosure",
    "toggle_pressed",
]
