"""Base class for pluggable systems.

This module provides the abstract base class that all pluggable systems must inherit from.
Systems are the building blocks of the game loop, each handling one concern of the
scene-connectivity layer (spatial indexing, doorways, scene transitions).

Example:
    Creating a custom system::

        from passage.systems.base import BaseSystem
        from passage.systems.registry import SystemRegistry

        @SystemRegistry.register
        class FootstepManager(BaseSystem):
            name = "footsteps"
            dependencies = ["doorway"]

            def setup(self, context):
                self.steps = 0

            def update(self, delta_time, context):
                if context.player_grid_position:
                    self.steps += 1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from passage.systems.game_context import GameContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    To create a custom system, subclass BaseSystem and implement setup(). Use the
    @SystemRegistry.register decorator to make the system available for loading.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        dependencies: List of system names this system depends on. Systems are
            set up in dependency order, ensuring dependencies are available
            when setup() is called.
        role: Optional attribute name under which the GameContext exposes the system
            (e.g. "doorway_registry" makes it reachable as context.doorway_registry).
    """

    # System identifier (must be unique across all systems)
    name: ClassVar[str]

    # Other systems this one depends on (by name)
    dependencies: ClassVar[list[str]] = []

    role: ClassVar[str | None] = None

    @abstractmethod
    def setup(self, context: GameContext) -> None:
        """Initialize the system before the game loop starts.

        Called after all systems have been instantiated and registered with the
        context, in dependency order.

        Args:
            context: Game context providing access to other systems via get_system().
        """

    def update(self, delta_time: float, context: GameContext) -> None:  # noqa: B027
        """Called every frame during the game loop.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
            context: Game context providing access to other systems.
        """

    def on_draw(self, context: GameContext) -> None:  # noqa: B027
        """Called during the draw phase of each frame (world coordinates).

        Args:
            context: Game context providing access to other systems.
        """

    def on_draw_ui(self, context: GameContext) -> None:  # noqa: B027
        """Called during the draw phase of each frame (screen coordinates).

        Args:
            context: Game context providing access to other systems.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the game exits.

        Override this method to release resources and unsubscribe from events.
        """
