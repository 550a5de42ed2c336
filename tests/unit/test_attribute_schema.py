"""Unit tests for attribute validation."""

from __future__ import annotations

import pytest
from markupsafe import Markup

from houndstooth.errors import (
    InvalidAttributeValueError,
    InvalidModifierValueError,
    MissingAttributeError,
)
from houndstooth.runtime.attribute_schema import AttributeSchema
from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.commands import CommandSequence


def _schema() -> AttributeSchema:
    return AttributeSchema.from_declarations(
        "widget",
        [
            AttributeSpec(name="id", required=True),
            AttributeSpec(name="heading", values=["h2", "h3"], default="h3"),
            AttributeSpec(name="disabled", type=AttributeType.BOOLEAN, default=False),
            AttributeSpec(name="on_click", type=AttributeType.COMMANDS),
            AttributeSpec(name="size", values=[None, "small", "large"]),
            AttributeSpec(name="rest", type=AttributeType.GLOBAL),
        ],
        [
            SlotSpec(name="inner_block", required=True),
            SlotSpec(name="item", attrs=[AttributeSpec(name="label", required=True)]),
        ],
        modifier_names=["size"],
    )


class TestAttributes:
    def test_defaults_applied(self) -> None:
        values = _schema().validate({"id": "w", "inner_block": "x"})
        assert values["heading"] == "h3"
        assert values["disabled"] is False
        assert values["size"] is None
        assert values["on_click"] is None

    def test_missing_required_attribute(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            _schema().validate({"inner_block": "x"})
        assert exc_info.value.attribute == "id"

    def test_value_outside_allowed_set(self) -> None:
        with pytest.raises(InvalidAttributeValueError) as exc_info:
            _schema().validate({"id": "w", "inner_block": "x", "heading": "h9"})
        assert not isinstance(exc_info.value, InvalidModifierValueError)
        assert exc_info.value.value == "h9"

    def test_modifier_value_outside_allowed_set(self) -> None:
        with pytest.raises(InvalidModifierValueError):
            _schema().validate({"id": "w", "inner_block": "x", "size": "huge"})

    def test_nullable_modifier(self) -> None:
        values = _schema().validate({"id": "w", "inner_block": "x", "size": None})
        assert values["size"] is None

    def test_commands_type_checked(self) -> None:
        sequence = CommandSequence().toggle_class("a")
        values = _schema().validate({"id": "w", "inner_block": "x", "on_click": sequence})
        assert values["on_click"] is sequence
        with pytest.raises(InvalidAttributeValueError):
            _schema().validate({"id": "w", "inner_block": "x", "on_click": "push"})

    def test_undeclared_attributes_collected(self) -> None:
        values = _schema().validate(
            {"id": "w", "inner_block": "x", "data-id": "3", "aria-busy": True}
        )
        assert values["rest"] == {"data-id": "3", "aria-busy": True}
        assert "data-id" not in values


class TestSlots:
    def test_missing_required_slot(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            _schema().validate({"id": "w"})
        assert exc_info.value.attribute == "inner_block"

    def test_string_slot_normalized(self) -> None:
        values = _schema().validate({"id": "w", "inner_block": Markup("<b>x</b>")})
        assert values["inner_block"] == [{"inner_block": Markup("<b>x</b>")}]
        assert values["item"] == []

    def test_slot_entries_validated(self) -> None:
        values = _schema().validate(
            {
                "id": "w",
                "inner_block": "x",
                "item": [{"label": "Edit", "inner_block": "E", "data-x": "1"}],
            }
        )
        assert values["item"] == [{"label": "Edit", "data-x": "1", "inner_block": "E"}]

    def test_slot_entry_missing_required_attribute(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            _schema().validate({"id": "w", "inner_block": "x", "item": {"inner_block": "E"}})
        assert exc_info.value.attribute == "label"


class TestWithoutGlobal:
    def test_undeclared_attributes_passed_through(self) -> None:
        schema = AttributeSchema.from_declarations("plain", [AttributeSpec(name="id")])
        assert schema.validate({"title": "t"}) == {"id": None, "title": "t"}
