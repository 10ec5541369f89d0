"""Registry of pluggable system classes.

Systems register themselves at import time with the @SystemRegistry.register
decorator. The SystemLoader imports the modules listed in INSTALLED_SYSTEMS, which
fills the registry, and then instantiates the registered classes by name.

Example:
    @SystemRegistry.register
    class MinimapManager(BaseSystem):
        name = "minimap"

        def setup(self, context):
            ...

    SystemRegistry.get("minimap")  # -> MinimapManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, TypeVar

if TYPE_CHECKING:
    from passage.systems.base import BaseSystem

logger = logging.getLogger(__name__)

SystemT = TypeVar("SystemT", bound="type[BaseSystem]")


class SystemRegistry:
    """Central registry mapping system names to system classes."""

    _systems: ClassVar[dict[str, type[BaseSystem]]] = {}

    @classmethod
    def register(cls, system_class: SystemT) -> SystemT:
        """Register a system class under its ``name`` attribute.

        Registering a second class under an existing name replaces the first,
        which lets a project swap a built-in system for its own implementation.

        Args:
            system_class: The BaseSystem subclass to register.

        Returns:
            The class unchanged, so this can be used as a decorator.

        Raises:
            ValueError: If the class does not define a name.
        """
        name = getattr(system_class, "name", None)
        if not name:
            msg = f"System class {system_class.__name__} must define a 'name' class variable"
            raise ValueError(msg)

        previous = cls._systems.get(name)
        if previous is not None and previous is not system_class:
            logger.info("Replacing system '%s': %s -> %s", name, previous.__name__, system_class.__name__)

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

    @classmethod
    def clear(cls) -> None:
        """Remove all registrations (mainly for tests)."""
        cls._systems.clear()
