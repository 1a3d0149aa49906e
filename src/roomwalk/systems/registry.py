"""Registry of available system classes.

Systems register themselves with the @SystemRegistry.register decorator when
their module is imported. The SystemLoader imports the modules listed in
INSTALLED_SYSTEMS and instantiates whatever ended up in the registry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from roomwalk.systems.base import BaseSystem

logger = logging.getLogger(__name__)


class SystemRegistry:
    """Class-level registry mapping system names to system classes."""

    _systems: ClassVar[dict[str, type[BaseSystem]]] = {}

    @classmethod
    def register(cls, system_class: type[BaseSystem]) -> type[BaseSystem]:
        """Register a system class under its ``name``.

        Registering a second class under an existing name replaces the first,
        which lets projects override a built-in system.
        """
        name = system_class.name
        if name in cls._systems and cls._systems[name] is not system_class:
            logger.debug("Replacing system '%s' with %s", name, system_class.__qualname__)
        cls._systems[name] = system_class
        return system_class

    @classmethod
    def get(cls, name: str) -> type[BaseSystem] | None:
        """Get a registered system class by name."""
        return cls._systems.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[BaseSystem]]:
        """Get a copy of all registered system classes."""
        return dict(cls._systems)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check whether a system name is registered."""
        return name in cls._systems
