"""Game context for passing state between systems.

This module provides the GameContext class, which serves as a central registry
for all game systems and the small amount of shared per-frame state they read.

Key components stored in the context:
- Systems registry: All pluggable systems accessed via get_system()
- Game state: Current scene id and the player's grid position
- Scene data: The static scene catalog every system builds from

Example usage:
    context = GameContext(
        event_bus=event_bus,
        scene_catalog=catalog,
        current_scene="startRoom",
    )

    # Register systems (done by SystemLoader)
    context.register_system("doorway", doorway_registry)

    # The player collaborator feeds its position each frame
    context.update_player_position(5.1, 3.1)

    # Systems are reachable by name or by role
    context.get_system("doorway") is context.doorway_registry  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import arcade

    from passage.events import EventBus
    from passage.scenes import SceneCatalog
    from passage.systems.base import BaseSystem
    from passage.systems.doorway.base import DoorwayBaseRegistry
    from passage.systems.scene.base import SceneBaseManager
    from passage.systems.spatial.base import SpatialBaseIndex


class GameContext:
    """Central context object providing access to all game systems.

    Systems are accessed by name using get_system(), which returns the system
    or None if not registered. Systems that declare a ``role`` are also exposed
    as attributes (context.doorway_registry, context.scene_manager, ...).

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        window: Reference to the arcade Window instance, if any.
        scene_catalog: Static scene definitions keyed by scene id.
        current_scene: Id of the currently loaded scene.
        player_grid_position: Player position in grid units, or None before the
            player has spawned.
    """

    spatial_index: SpatialBaseIndex
    doorway_registry: DoorwayBaseRegistry
    scene_manager: SceneBaseManager

    def __init__(
        self,
        event_bus: EventBus,
        window: arcade.Window | None = None,
        scene_catalog: SceneCatalog | None = None,
        current_scene: str = "",
        player_grid_position: tuple[float, float] | None = None,
    ) -> None:
        """Initialize game context with game state.

        Args:
            event_bus: Central event system for publishing and subscribing to game events.
            window: Reference to the arcade Window instance (None when running headless).
            scene_catalog: Static scene catalog. Never mutated by systems.
            current_scene: Id of the scene the player is in.
            player_grid_position: Initial player position in grid units.
        """
        self.event_bus = event_bus
        self.window = window
        self.scene_catalog: SceneCatalog = scene_catalog or {}
        self.current_scene = current_scene
        self.player_grid_position = player_grid_position

        # Registry for all pluggable systems (accessed via get_system)
        self._systems: dict[str, BaseSystem] = {}

    def update_player_position(self, grid_x: float, grid_y: float) -> None:
        """Record the player's position in grid units for this frame."""
        self.player_grid_position = (grid_x, grid_y)

    def update_scene(self, scene_id: str) -> None:
        """Update the current scene id.

        Called by the SceneManager when a transition switches scenes.
        """
        self.current_scene = scene_id

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a pluggable system with the context.

        Args:
            name: Unique identifier for the system (e.g., "doorway", "scene").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None."""
        return self._systems.get(name)

    def get_systems(self) -> dict[str, BaseSystem]:
        """Get all registered systems."""
        return self._systems
