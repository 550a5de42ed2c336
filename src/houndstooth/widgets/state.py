"""
State logic of the interactive widgets.

Pure functions used from the widget templates and ``prepare`` hooks: initial
accordion expansion, the toggle commands of accordion, disclosure and toggle
buttons, breadcrumb current-item marking, and label enforcement.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from houndstooth.errors import MissingLabelError, PreconditionError
from houndstooth.specs.commands import CommandSequence


class ExpansionMode(str, Enum):
    """Initial expansion of accordion sections."""

    ALL = "all"
    NONE = "none"
    FIRST = "first"


def accordion_section_expanded(index: int, mode: ExpansionMode | str) -> bool:
    """Whether the accordion section at 1-based ``index`` starts expanded."""
    mode = ExpansionMode(mode)
    if mode is ExpansionMode.ALL:
        return True
    if mode is ExpansionMode.NONE:
        return False
    return index == 1


def accordion_trigger_id(accordion_id: str, index: int) -> str:
    return f"{accordion_id}-trigger-{index}"


def accordion_section_id(accordion_id: str, index: int) -> str:
    return f"{accordion_id}-section-{index}"


def toggle_accordion_section(accordion_id: str, index: int) -> CommandSequence:
    """Commands flipping one accordion section open or closed.

    Toggles ``aria-expanded`` on the section's trigger and the presence of the
    ``hidden`` attribute on the section itself.
    """
    return (
        CommandSequence()
        .toggle_attribute(
            "aria-expanded",
            "true",
            "false",
            to=f"#{accordion_trigger_id(accordion_id, index)}",
        )
        .toggle_attribute(
            "hidden", "hidden", to=f"#{accordion_section_id(accordion_id, index)}"
        )
    )


def toggle_disclosure() -> CommandSequence:
    """Commands flipping ``aria-expanded`` on the disclosure button itself.

    Showing and hiding the controlled element is left to the caller.
    """
    return CommandSequence().toggle_attribute("aria-expanded", "true", "false")


def toggle_pressed(on_click: CommandSequence | None = None) -> CommandSequence:
    """Append the ``aria-pressed`` toggle of a toggle button to ``on_click``."""
    return (on_click or CommandSequence()).toggle_attribute(
        "aria-pressed", "true", "false"
    )


def mark_current_item(items: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Mark the last breadcrumb item as the current page.

    Returns copies of the items in the same order, each with a ``current``
    flag that is true only for the last one.

    Raises:
        PreconditionError: If ``items`` is empty.
    """
    if not items:
        raise PreconditionError("breadcrumb requires at least one item")
    last, *rest = reversed(items)
    marked = [{**last, "current": True}] + [{**item, "current": False} for item in rest]
    return list(reversed(marked))


def ensure_label(attrs: Mapping[str, Any], component: str, example: str) -> None:
    """Raise unless ``label`` or ``labelledby`` is set."""
    if attrs.get("label") is None and attrs.get("labelledby") is None:
        raise MissingLabelError(component, example)
