"""Process-wide registry of compiled components.

The registry is populated while components are compiled at startup and then
frozen. After ``freeze()`` it is read-only, so lookups from concurrent render
calls need no coordination.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

from houndstooth.errors import (
    ComponentNotFoundError,
    DuplicateComponentError,
    RegistryFrozenError,
)

if TYPE_CHECKING:
    from houndstooth.compiler.compiler import RenderUnit

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Render units keyed by component name."""

    def __init__(self) -> None:
        self._units: dict[str, RenderUnit] = {}
        self._frozen = False
        self._lock = threading.Lock()

    def register(self, unit: RenderUnit) -> None:
        """Register a render unit under its name.

        Raises:
            DuplicateComponentError: If the name is already registered.
            RegistryFrozenError: If the registry was frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(unit.name)
            if unit.name in self._units:
                raise DuplicateComponentError(unit.name)
            self._units[unit.name] = unit
        logger.debug("Registered component %s (base class %r)", unit.name, unit.base_class)

    def get(self, name: str) -> RenderUnit:
        """Look up a render unit by component name."""
        try:
            return self._units[name]
        except KeyError:
            raise ComponentNotFoundError(name) from None

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._lock:
            self._frozen = True
        logger.info("Component registry frozen with %d component(s)", len(self._units))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return list(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)


# Module-level singleton
default_registry = ComponentRegistry()


def get_component(name: str) -> RenderUnit:
    """Look up a component in the default registry."""
    return default_registry.get(name)
