"""Loading and lifecycle management for pluggable systems.

The SystemLoader imports every module in INSTALLED_SYSTEMS (which registers the
system classes), instantiates them, orders them by their declared dependencies and
then fans the per-frame lifecycle calls out to each of them.

Example:
    loader = SystemLoader()
    systems = loader.instantiate_all()
    loader.setup_all(context)

    # every frame
    loader.update_all(delta_time, context)
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from passage.conf import settings
from passage.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from passage.systems.base import BaseSystem
    from passage.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """Raised when a system depends on a system that is not installed."""


class CircularDependencyError(Exception):
    """Raised when system dependencies form a cycle."""


class SystemLoader:
    """Instantiates installed systems and drives their lifecycle in dependency order.

    Attributes:
        installed_systems: Module paths imported to register system classes.
        systems: Instantiated systems keyed by name, in dependency order.
    """

    def __init__(self, installed_systems: list[str] | None = None) -> None:
        """Initialize the loader.

        Args:
            installed_systems: Module paths to import. Defaults to settings.INSTALLED_SYSTEMS.
        """
        if installed_systems is None:
            installed_systems = list(settings.INSTALLED_SYSTEMS)
        self.installed_systems = installed_systems
        self.systems: dict[str, BaseSystem] = {}

    def load_modules(self) -> None:
        """Import every installed system module so its classes register themselves."""
        for module_path in self.installed_systems:
            try:
                importlib.import_module(module_path)
            except ImportError as exc:
                msg = f"Installed system module '{module_path}' could not be imported"
                raise MissingDependencyError(msg) from exc
            logger.debug("Imported system module %s", module_path)

    def instantiate_all(self, names: list[str] | None = None) -> dict[str, BaseSystem]:
        """Instantiate systems in dependency order.

        Args:
            names: System names to instantiate. Defaults to every registered system
                after the installed modules have been imported.

        Returns:
            Dictionary of system name to instance, ordered so that every system comes
            after the systems it depends on.

        Raises:
            MissingDependencyError: If a requested system or one of its dependencies
                is not registered.
            CircularDependencyError: If dependencies form a cycle.
        """
        self.load_modules()

        registered = SystemRegistry.get_all()
        if names is None:
            names = list(registered)

        for name in names:
            if name not in registered:
                msg = f"System '{name}' is not registered"
                raise MissingDependencyError(msg)

        self.systems = {}
        for name in self._resolve_order(names, registered):
            self.systems[name] = registered[name]()
            logger.debug("Instantiated system '%s'", name)

        logger.info("Loaded %d systems: %s", len(self.systems), ", ".join(self.systems))
        return self.systems

    def _resolve_order(self, names: list[str], registered: dict[str, type[BaseSystem]]) -> list[str]:
        """Topologically sort the requested systems by their dependencies."""
        requested = set(names)
        ordered: list[str] = []
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(name: str, chain: list[str]) -> None:
            if name in done:
                return
            if name in visiting:
                cycle = " -> ".join([*chain, name])
                msg = f"Circular system dependency: {cycle}"
                raise CircularDependencyError(msg)

            visiting.add(name)
            for dependency in registered[name].dependencies:
                if dependency not in requested:
                    msg = f"System '{name}' depends on '{dependency}', which is not installed"
                    raise MissingDependencyError(msg)
                visit(dependency, [*chain, name])
            visiting.discard(name)
            done.add(name)
            ordered.append(name)

        for name in names:
            visit(name, [])
        return ordered

    def setup_all(self, context: GameContext) -> None:
        """Register every system with the context, then set them up in order."""
        for name, system in self.systems.items():
            context.register_system(name, system)
        for system in self.systems.values():
            system.setup(context)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get an instantiated system by name."""
        return self.systems.get(name)

    def update_all(self, delta_time: float, context: GameContext) -> None:
        """Call update() on every system."""
        for system in self.systems.values():
            system.update(delta_time, context)

    def draw_all(self, context: GameContext) -> None:
        """Call on_draw() on every system."""
        for system in self.systems.values():
            system.on_draw(context)

    def draw_ui_all(self, context: GameContext) -> None:
        """Call on_draw_ui() on every system."""
        for system in self.systems.values():
            system.on_draw_ui(context)

    def cleanup_all(self) -> None:
        """Clean up systems in reverse dependency order."""
        for system in reversed(list(self.systems.values())):
            system.cleanup()
