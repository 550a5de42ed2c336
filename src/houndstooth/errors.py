"""
Error types for component compilation, registration, and rendering.
"""

from __future__ import annotations


class HoundstoothError(Exception):
    """Base exception for all houndstooth errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Compile-time errors
# =============================================================================


class CompileError(HoundstoothError):
    """
    Raised when a component specification cannot be compiled.

    Compile errors are fatal: they abort the registration phase and are meant
    to surface during development or at startup, never per request.
    """

    pass


class DuplicateAttributeError(CompileError):
    """
    Raised when two declarations of one component share a name.

    Examples:
    - A modifier named like an explicitly declared attribute
    - A slot named like an attribute
    - Two modifiers with the same name
    """

    def __init__(self, component: str, attribute: str):
        self.component = component
        self.attribute = attribute
        super().__init__(
            f"Component '{component}' declares '{attribute}' more than once "
            "(modifier, attribute and slot names must be unique)"
        )


class DuplicateComponentError(CompileError):
    """Raised when a component name is registered twice."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Component '{component}' is already registered")


class RegistryFrozenError(CompileError):
    """Raised when registering into a registry that was already frozen."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(
            f"Cannot register component '{component}': the registry is frozen"
        )


class ComponentNotFoundError(HoundstoothError):
    """Raised when looking up a component name that was never registered."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Unknown component '{component}'")


# =============================================================================
# Render-time errors
# =============================================================================


class AttributeValidationError(HoundstoothError):
    """Raised when the attributes passed to a component are rejected."""

    def __init__(self, component: str, attribute: str, message: str):
        self.component = component
        self.attribute = attribute
        super().__init__(f"{component}: {message}")


class MissingAttributeError(AttributeValidationError):
    """Raised when a required attribute or slot is not supplied."""

    def __init__(self, component: str, attribute: str):
        super().__init__(
            component, attribute, f"missing required attribute or slot '{attribute}'"
        )


class InvalidAttributeValueError(AttributeValidationError):
    """Raised when an attribute value has the wrong type or is not allowed."""

    def __init__(self, component: str, attribute: str, value: object, detail: str):
        self.value = value
        super().__init__(
            component, attribute, f"invalid value {value!r} for '{attribute}': {detail}"
        )


class InvalidModifierValueError(InvalidAttributeValueError):
    """Raised when a modifier attribute receives a value outside its allowed set."""

    pass


class MissingLabelError(HoundstoothError):
    """Raised when a widget requires an accessible label but none was given."""

    def __init__(self, component: str, example: str):
        self.component = component
        super().__init__(
            f"{component} requires either a `label` or a `labelledby` attribute.\n\n"
            f"Example:\n\n    label=\"{example}\"\n\n"
            "Set `labelledby` to the DOM ID of a visible element that labels "
            f"the {component} instead, if one exists."
        )


class PreconditionError(HoundstoothError):
    """Raised when a widget receives input that violates its contract."""

    pass
