"""
houndstooth - declarative, reusable UI components for server-rendered views.

Components are described once as specifications (name, root class, style
modifiers, attributes and slots, template) and compiled at startup into
render units that turn an attribute bag into markup.
"""

from __future__ import annotations

from houndstooth._version import __version__
from houndstooth.errors import (
    AttributeValidationError,
    CompileError,
    ComponentNotFoundError,
    DuplicateAttributeError,
    DuplicateComponentError,
    HoundstoothError,
    InvalidAttributeValueError,
    InvalidModifierValueError,
    MissingAttributeError,
    MissingLabelError,
    PreconditionError,
    RegistryFrozenError,
)
from houndstooth.specs import (
    AttributeSpec,
    AttributeType,
    CommandSequence,
    ComponentSpec,
    ModifierSpec,
    SlotSpec,
    toggle_attribute,
    toggle_class,
)
from houndstooth.compiler import (  # noqa: I001
    ComponentRegistry,
    RenderUnit,
    compile_component,
    default_registry,
    get_component,
    resolve_modifier_classes,
)
from houndstooth.config import WidgetConfig
from houndstooth.runtime import configure_templates
from houndstooth.widgets import modifier_class_name, register_catalog

__all__ = [
    "__version__",
    "AttributeValidationError",
    "CompileError",
    "ComponentNotFoundError",
    "DuplicateAttributeError",
    "DuplicateComponentError",
    "HoundstoothError",
    "InvalidAttributeValueError",
    "InvalidModifierValueError",
    "MissingAttributeError",
    "MissingLabelError",
    "PreconditionError",
    "RegistryFrozenError",
    "AttributeSpec",
    "AttributeType",
    "CommandSequence",
    "ComponentSpec",
    "ModifierSpec",
    "SlotSpec",
    "toggle_attribute",
    "toggle_class",
    "ComponentRegistry",
    "RenderUnit",
    "compile_component",
    "default_registry",
    "get_component",
    "resolve_modifier_classes",
    "WidgetConfig",
    "configure_templates",
    "modifier_class_name",
    "register_catalog",
]
