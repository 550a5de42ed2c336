"""
Attribute validation for compiled components.

Turns attribute and slot declarations into a pydantic model per component.
Calling ``AttributeSchema.validate`` on a caller's attribute bag applies
defaults, enforces required attributes and allowed values, collects
undeclared HTML attributes into the global attribute, and normalizes slots.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, InstanceOf, ValidationError, create_model

from houndstooth.errors import (
    InvalidAttributeValueError,
    InvalidModifierValueError,
    MissingAttributeError,
)
from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.commands import CommandSequence

_BASE_TYPES: dict[AttributeType, Any] = {
    AttributeType.STRING: str,
    AttributeType.ATOM: str,
    AttributeType.BOOLEAN: bool,
    AttributeType.INTEGER: int,
    AttributeType.ANY: Any,
    AttributeType.COMMANDS: InstanceOf[CommandSequence],
}

_MODEL_CONFIG = ConfigDict(extra="allow", arbitrary_types_allowed=True)


def _annotation(spec: AttributeSpec) -> Any:
    annotation = _BASE_TYPES[spec.type]
    allowed = [v for v in spec.values or [] if v is not None]
    if allowed:
        annotation = Literal[tuple(allowed)]
    if not spec.required and annotation is not Any:
        annotation = annotation | None
    return annotation


def _build_model(name: str, attributes: Iterable[AttributeSpec]) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for spec in attributes:
        if spec.is_global:
            continue
        default = ... if spec.required else spec.default
        fields[spec.name] = (_annotation(spec), default)
    return create_model(name, __config__=_MODEL_CONFIG, **fields)


@dataclass(frozen=True)
class _SlotSchema:
    spec: SlotSpec
    model: type[BaseModel] | None


@dataclass(frozen=True)
class AttributeSchema:
    """Validator for the attribute bag of one component."""

    component: str
    model: type[BaseModel]
    global_name: str | None = None
    slots: tuple[_SlotSchema, ...] = ()
    modifier_names: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_declarations(
        cls,
        component: str,
        attributes: Sequence[AttributeSpec],
        slots: Sequence[SlotSpec] = (),
        modifier_names: Iterable[str] = (),
    ) -> AttributeSchema:
        global_name = next((a.name for a in attributes if a.is_global), None)
        slot_schemas = tuple(
            _SlotSchema(
                spec=slot,
                model=_build_model(f"{component}_{slot.name}_slot", slot.attrs)
                if slot.attrs
                else None,
            )
            for slot in slots
        )
        return cls(
            component=component,
            model=_build_model(f"{component}_attributes", attributes),
            global_name=global_name,
            slots=slot_schemas,
            modifier_names=frozenset(modifier_names),
        )

    def validate(self, bag: Mapping[str, Any]) -> dict[str, Any]:
        """Validate an attribute bag.

        Returns:
            Declared attributes (with defaults applied), normalized slots,
            and, when a global attribute is declared, every undeclared
            attribute collected under its name.

        Raises:
            MissingAttributeError: A required attribute or slot is absent.
            InvalidModifierValueError: A modifier value is not allowed.
            InvalidAttributeValueError: Any other attribute value is invalid.
        """
        values = dict(bag)
        slots: dict[str, list[dict[str, Any]]] = {}
        for slot in self.slots:
            raw = values.pop(slot.spec.name, None)
            if raw is None and slot.spec.required:
                raise MissingAttributeError(self.component, slot.spec.name)
            slots[slot.spec.name] = self._validate_slot(slot, raw)

        validated = self._validate_model(self.model, values)
        result = _declared(validated)
        extras = dict(validated.model_extra or {})
        if self.global_name is not None:
            result[self.global_name] = extras
        else:
            result.update(extras)
        result.update(slots)
        return result

    def _validate_model(self, model: type[BaseModel], values: Mapping[str, Any]) -> BaseModel:
        try:
            return model.model_validate(values)
        except ValidationError as exc:
            error = exc.errors()[0]
            attribute = str(error["loc"][0]) if error["loc"] else "?"
            if error["type"] == "missing":
                raise MissingAttributeError(self.component, attribute) from exc
            value = values.get(attribute)
            if attribute in self.modifier_names:
                raise InvalidModifierValueError(
                    self.component, attribute, value, error["msg"]
                ) from exc
            raise InvalidAttributeValueError(
                self.component, attribute, value, error["msg"]
            ) from exc

    def _validate_slot(self, slot: _SlotSchema, raw: Any) -> list[dict[str, Any]]:
        entries = []
        for entry in _slot_entries(raw):
            if slot.model is not None:
                inner = entry.pop("inner_block", None)
                validated = self._validate_model(slot.model, entry)
                entry = {
                    **_declared(validated),
                    **(validated.model_extra or {}),
                    "inner_block": inner,
                }
            entries.append(entry)
        return entries


def _slot_entries(raw: Any) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [_slot_entry(item) for item in raw]
    return [_slot_entry(raw)]


def _slot_entry(item: Any) -> dict[str, Any]:
    if isinstance(item, Mapping):
        return dict(item)
    return {"inner_block": item}


def _declared(instance: BaseModel) -> dict[str, Any]:
    # getattr instead of model_dump: values such as CommandSequence stay intact
    return {name: getattr(instance, name) for name in type(instance).model_fields}
