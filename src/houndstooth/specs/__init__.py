"""
Specification type definitions.

This module exports the declarative types components are built from.
"""

from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.commands import (
    CommandSequence,
    Instruction,
    ToggleAttribute,
    ToggleClass,
    toggle_attribute,
    toggle_class,
)
from houndstooth.specs.component import ComponentSpec, ComponentType, identity
from houndstooth.specs.modifier import ModifierSpec

__all__ = [
    "AttributeSpec",
    "AttributeType",
    "SlotSpec",
    "CommandSequence",
    "Instruction",
    "ToggleAttribute",
    "ToggleClass",
    "toggle_attribute",
    "toggle_class",
    "ComponentSpec",
    "ComponentType",
    "identity",
    "ModifierSpec",
]
