"""
Modifier class resolution.

Maps modifier attribute values to class tokens at render time. Output order
always follows the declared modifier order, never the order of the value
mapping, so the generated class string is stable across renders.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any


def resolve_modifier_classes(
    modifier_names: Sequence[str],
    class_name_fn: Callable[[str], str],
    values: Mapping[str, Any],
) -> list[str | None]:
    """Resolve one class token per modifier.

    Args:
        modifier_names: Modifier names in declaration order.
        class_name_fn: Maps a modifier value to a class name.
        values: Attribute values of the current render call.

    Returns:
        A list as long as ``modifier_names``. Entry ``i`` is
        ``class_name_fn(values[modifier_names[i]])`` when that value is a
        string, and ``None`` when it is unset or of any other type. Non-string
        values (booleans, numbers) never produce a class.
    """
    classes: list[str | None] = []
    for name in modifier_names:
        value = values.get(name)
        if isinstance(value, str):
            classes.append(class_name_fn(value))
        else:
            classes.append(None)
    return classes


def class_names(*tokens: Any) -> str:
    """Join class tokens into a class attribute value.

    Nested lists and tuples are flattened. ``None`` and ``False`` entries are
    dropped; every other token, including the empty string, is kept.

    Examples:
        >>> class_names("badge", ["large", None], False)
        'badge large'
    """
    return " ".join(_flatten(tokens))


def build_class_list(
    base_class: str, resolved: Iterable[str | None], *extra: Any
) -> str:
    """Base class followed by the resolved modifier classes, then ``extra``."""
    return class_names(base_class, list(resolved), *extra)


def _flatten(tokens: Iterable[Any]) -> list[str]:
    flat: list[str] = []
    for token in tokens:
        if token is None or token is False:
            continue
        if isinstance(token, (list, tuple)):
            flat.extend(_flatten(token))
        else:
            flat.append(str(token))
    return flat
