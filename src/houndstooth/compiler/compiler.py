"""
Component compiler - turns a ComponentSpec into a callable render unit.

Compilation happens once per component at startup:

1. derive the base class from the component name when none is given,
2. merge the synthesized modifier attributes into the declared attributes,
3. build the attribute schema and the render unit,
4. register the unit by name.

At render time the unit validates the attribute bag, resolves the modifier
classes, and hands everything to the template.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from houndstooth.compiler.modifiers import resolve_modifier_classes
from houndstooth.compiler.registry import ComponentRegistry, default_registry
from houndstooth.compiler.schema import merge_attributes
from houndstooth.runtime.attribute_schema import AttributeSchema
from houndstooth.runtime.template_renderer import render_template
from houndstooth.specs.attributes import AttributeSpec
from houndstooth.specs.component import ComponentSpec

logger = logging.getLogger(__name__)

_LOWER_UPPER = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_ACRONYM_WORD = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")


def derive_base_class(name: str) -> str:
    """Derive the default base class from a component name.

    Underscores and case changes become dashes and the result is lowercased.

    Examples:
        >>> derive_base_class("button_link")
        'button-link'
        >>> derive_base_class("ToggleButton")
        'toggle-button'
    """
    kebab = _ACRONYM_WORD.sub("-", _LOWER_UPPER.sub("-", name))
    return kebab.replace("_", "-").lower()


@dataclass(frozen=True)
class RenderUnit:
    """Compiled component. Calling it renders markup for one attribute bag."""

    name: str
    spec: ComponentSpec
    base_class: str
    accepted_attributes: tuple[AttributeSpec, ...]
    schema: AttributeSchema
    env: Environment | None = None

    def __call__(self, attrs: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Markup:
        return self.render(attrs, **kwargs)

    def render(self, attrs: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Markup:
        """Render the component.

        Args:
            attrs: Attribute bag. Use it for names that are not valid Python
                identifiers, such as ``data-id`` or ``aria-label``.
            **kwargs: More attributes, merged over ``attrs``.

        Raises:
            AttributeValidationError: If the attributes are rejected.
        """
        values = self.schema.validate({**(attrs or {}), **kwargs})
        context = self.build_context(values)
        template = self.spec.template
        if callable(template):
            return Markup(template(context))
        return render_template(template, context, self.env)

    def build_context(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Template context for validated attribute values."""
        context: dict[str, Any] = {
            **self.spec.extra,
            **values,
            "base_class": self.base_class,
            "modifier_classes": resolve_modifier_classes(
                self.spec.modifier_names, self.spec.class_name_fn, values
            ),
        }
        if self.spec.prepare is not None:
            context = self.spec.prepare(context)
        return context

    def get_attribute(self, name: str) -> AttributeSpec | None:
        """Get accepted attribute (declared or synthesized) by name."""
        for attribute in self.accepted_attributes:
            if attribute.name == name:
                return attribute
        return None


def compile_component(
    spec: ComponentSpec,
    registry: ComponentRegistry | None = None,
    *,
    env: Environment | None = None,
) -> RenderUnit:
    """Compile a component specification and register the result.

    Args:
        spec: The component specification.
        registry: Registry to add the render unit to. Defaults to the
            process-wide registry.
        env: Jinja2 environment for template rendering. Defaults to the
            shared environment, looked up at render time.

    Returns:
        The registered render unit.

    Raises:
        DuplicateAttributeError: If a modifier, attribute or slot name is
            declared twice.
        DuplicateComponentError: If the name is already registered.
    """
    base_class = spec.base_class or derive_base_class(spec.name)
    accepted = merge_attributes(spec.name, spec.modifiers, spec.attributes, spec.slots)
    schema = AttributeSchema.from_declarations(
        spec.name, accepted, spec.slots, spec.modifier_names
    )
    unit = RenderUnit(
        name=spec.name,
        spec=spec,
        base_class=base_class,
        accepted_attributes=tuple(accepted),
        schema=schema,
        env=env,
    )
    (registry if registry is not None else default_registry).register(unit)
    logger.debug("Compiled component %s", spec.name)
    return unit
