"""
Attribute schema synthesis.

Every modifier becomes a string attribute with the same name, allowed values
and default, so modifiers are declared, documented, and validated like any
other attribute.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from houndstooth.errors import DuplicateAttributeError
from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.modifier import ModifierSpec

logger = logging.getLogger(__name__)


def synthesize_modifier_attributes(
    modifiers: Sequence[ModifierSpec],
) -> list[AttributeSpec]:
    """Build one string attribute declaration per modifier, in order."""
    return [
        AttributeSpec(
            name=modifier.name,
            type=AttributeType.STRING,
            values=list(modifier.values) if modifier.values else None,
            default=modifier.default,
            required=modifier.required,
            doc=modifier.doc or f"Adds a modifier class based on the `{modifier.name}` value.",
        )
        for modifier in modifiers
    ]


def merge_attributes(
    component: str,
    modifiers: Sequence[ModifierSpec],
    attributes: Sequence[AttributeSpec],
    slots: Sequence[SlotSpec] = (),
) -> list[AttributeSpec]:
    """Union of the explicit attributes and the synthesized modifier attributes.

    Args:
        component: Component name, used in error messages.
        modifiers: Modifier definitions of the component.
        attributes: Explicitly declared attributes.
        slots: Declared slots; their names share the attribute namespace.

    Returns:
        Explicit attributes followed by the modifier attributes.

    Raises:
        DuplicateAttributeError: If any name is declared more than once.
    """
    synthesized = synthesize_modifier_attributes(modifiers)
    seen: set[str] = set()
    for name in [a.name for a in attributes] + [s.name for s in slots] + [
        a.name for a in synthesized
    ]:
        if name in seen:
            raise DuplicateAttributeError(component, name)
        seen.add(name)

    logger.debug(
        "Synthesized %d modifier attribute(s) for %s", len(synthesized), component
    )
    return [*attributes, *synthesized]
