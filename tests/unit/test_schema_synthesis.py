"""Unit tests for modifier attribute synthesis."""

from __future__ import annotations

import pytest

from houndstooth.compiler.schema import merge_attributes, synthesize_modifier_attributes
from houndstooth.errors import DuplicateAttributeError
from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.modifier import ModifierSpec

SIZE = ModifierSpec(name="size", values=["small", "large"], default="small")
VARIANT = ModifierSpec(name="variant", values=[None, "primary"])
KIND = ModifierSpec(name="kind", values=["image", "text"], required=True)


class TestSynthesize:
    def test_one_string_attribute_per_modifier(self) -> None:
        attributes = synthesize_modifier_attributes([SIZE, VARIANT, KIND])
        assert [a.name for a in attributes] == ["size", "variant", "kind"]
        assert all(a.type == AttributeType.STRING for a in attributes)

    def test_carries_values_default_and_required(self) -> None:
        size, variant, kind = synthesize_modifier_attributes([SIZE, VARIANT, KIND])
        assert size.values == ["small", "large"]
        assert size.default == "small"
        assert size.required is False
        assert variant.values == [None, "primary"]
        assert variant.default is None
        assert kind.required is True

    def test_unrestricted_modifier(self) -> None:
        (attribute,) = synthesize_modifier_attributes([ModifierSpec(name="tone")])
        assert attribute.values is None

    def test_documented(self) -> None:
        (attribute,) = synthesize_modifier_attributes([SIZE])
        assert attribute.doc
        (custom,) = synthesize_modifier_attributes(
            [ModifierSpec(name="size", doc="Size of the badge.")]
        )
        assert custom.doc == "Size of the badge."


class TestMerge:
    def test_explicit_attributes_first(self) -> None:
        merged = merge_attributes("badge", [SIZE], [AttributeSpec(name="id")])
        assert [a.name for a in merged] == ["id", "size"]

    def test_modifier_colliding_with_attribute(self) -> None:
        with pytest.raises(DuplicateAttributeError) as exc_info:
            merge_attributes("badge", [SIZE], [AttributeSpec(name="size")])
        assert exc_info.value.component == "badge"
        assert exc_info.value.attribute == "size"

    def test_modifier_colliding_with_slot(self) -> None:
        with pytest.raises(DuplicateAttributeError):
            merge_attributes("badge", [SIZE], [], [SlotSpec(name="size")])

    def test_duplicate_modifiers(self) -> None:
        with pytest.raises(DuplicateAttributeError):
            merge_attributes("badge", [SIZE, SIZE], [])

    def test_global_attribute_kept(self) -> None:
        rest = AttributeSpec(name="rest", type=AttributeType.GLOBAL)
        merged = merge_attributes("badge", [SIZE], [rest])
        assert merged[0].is_global
