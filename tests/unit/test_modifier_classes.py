"""Unit tests for modifier class resolution."""

from __future__ import annotations

from houndstooth.compiler.modifiers import (
    build_class_list,
    class_names,
    resolve_modifier_classes,
)
from houndstooth.specs.component import identity
from houndstooth.widgets.catalog import modifier_class_name


class TestResolveModifierClasses:
    def test_example_size_set_variant_unset(self) -> None:
        resolved = resolve_modifier_classes(["size", "variant"], identity, {"size": "large"})
        assert resolved == ["large", None]
        assert build_class_list("badge", resolved) == "badge large"

    def test_output_follows_declared_order(self) -> None:
        values = {"variant": "danger", "size": "small"}
        assert resolve_modifier_classes(["size", "variant"], identity, values) == [
            "small",
            "danger",
        ]
        assert resolve_modifier_classes(["variant", "size"], identity, values) == [
            "danger",
            "small",
        ]

    def test_non_string_values_are_absent(self) -> None:
        values = {"a": True, "b": False, "c": 3, "d": None, "e": ["x"]}
        assert resolve_modifier_classes(list(values), identity, values) == [None] * 5

    def test_empty_string_is_not_absent(self) -> None:
        assert resolve_modifier_classes(["size"], identity, {"size": ""}) == [""]

    def test_class_name_fn_applied(self) -> None:
        resolved = resolve_modifier_classes(["size"], modifier_class_name, {"size": "large"})
        assert resolved == ["is-large"]

    def test_unrelated_values_ignored(self) -> None:
        resolved = resolve_modifier_classes(["size"], identity, {"id": "x", "label": "y"})
        assert resolved == [None]

    def test_no_modifiers(self) -> None:
        assert resolve_modifier_classes([], identity, {"size": "large"}) == []


class TestClassNames:
    def test_drops_none_and_false(self) -> None:
        assert class_names("stack", [None, "large"], False, None) == "stack large"

    def test_flattens_nested_lists(self) -> None:
        assert class_names("a", ["b", ("c", ["d"])]) == "a b c d"

    def test_keeps_empty_string_tokens(self) -> None:
        assert class_names("frame", [""]) == "frame "

    def test_build_class_list_appends_extra_after_modifiers(self) -> None:
        assert build_class_list("button", ["primary", None], "is-disabled") == (
            "button primary is-disabled"
        )
