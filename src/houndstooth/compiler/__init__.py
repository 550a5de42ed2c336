"""
Component compiler.

Modifier class resolution, attribute schema synthesis, compilation of
component specifications into render units, and the component registry.
"""

from houndstooth.compiler.modifiers import (
    build_class_list,
    class_names,
    resolve_modifier_classes,
)
from houndstooth.compiler.registry import ComponentRegistry, default_registry, get_component
from houndstooth.compiler.schema import merge_attributes, synthesize_modifier_attributes
from houndstooth.compiler.compiler import RenderUnit, compile_component, derive_base_class  # noqa: I001

__all__ = [
    "build_class_list",
    "class_names",
    "resolve_modifier_classes",
    "ComponentRegistry",
    "default_registry",
    "get_component",
    "merge_attributes",
    "synthesize_modifier_attributes",
    "RenderUnit",
    "compile_component",
    "derive_base_class",
]
