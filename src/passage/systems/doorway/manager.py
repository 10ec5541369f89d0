"""Doorway management system for scene connectivity.

This module provides the DoorwayRegistry class, which turns the exits authored in
the scene catalog into positioned Doorway instances and drives them every frame:

- Build doorways per scene, in exit order, from ExitDescriptors
- Apply authored position overrides from DOORWAY_POSITION_OVERRIDES
- Register every doorway into the spatial index
- Open/close doorways as the player approaches and leaves them
- Ask the SceneManager to load a new scene when the player reaches a floor portal,
  at most once per DOORWAY_TRANSITION_COOLDOWN window

Wall doorways react to the player (they open and close) but never trigger a scene
load; only floor portals do.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar, cast

from passage.conf import settings
from passage.systems.doorway.base import (
    Direction,
    Doorway,
    DoorwayBaseRegistry,
    DoorwayKind,
    DoorwayState,
    WallSide,
)
from passage.systems.doorway.events import DoorwayClosedEvent, DoorwayEnteredEvent, DoorwayOpenedEvent
from passage.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from passage.events import EventBus
    from passage.scenes import ExitDescriptor, SceneCatalog, SceneDefinition
    from passage.systems.game_context import GameContext
    from passage.systems.scene.base import SceneBaseManager
    from passage.systems.spatial.base import SpatialBaseIndex

logger = logging.getLogger(__name__)


@SystemRegistry.register
class DoorwayRegistry(DoorwayBaseRegistry):
    """Builds, indexes and drives every doorway of every scene.

    The registry is an explicit object passed to (or looked up by) the frame loop;
    there is no module-level singleton.

    Attributes:
        doorways_by_scene: Doorways per scene id, in exit order.
        transition_cooldown: Seconds left before any floor portal may trigger
            another scene load. Shared by all doorways.
    """

    name: ClassVar[str] = "doorway"
    dependencies: ClassVar[list[str]] = ["spatial"]

    def __init__(
        self,
        scene_manager: SceneBaseManager | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize the doorway registry.

        Args:
            scene_manager: Collaborator that loads scenes. When omitted it is looked up
                from the game context passed to setup().
            event_bus: Bus for doorway events. When omitted the context's bus is used.
        """
        self.doorways_by_scene: dict[str, list[Doorway]] = {}
        self.transition_cooldown: float = 0.0
        self._scene_manager = scene_manager
        self._event_bus = event_bus
        self._context: GameContext | None = None

    def setup(self, context: GameContext) -> None:
        """Build doorways for every scene in the context's catalog."""
        self._context = context
        if self._event_bus is None:
            self._event_bus = context.event_bus

        spatial_index = cast("SpatialBaseIndex | None", context.get_system("spatial"))
        self.initialize(context.scene_catalog, spatial_index)

    def initialize(
        self,
        scene_catalog: SceneCatalog,
        spatial_index: SpatialBaseIndex | None,
        scene_ids: list[str] | None = None,
    ) -> int:
        """Build doorways from the scene catalog and register them in the spatial index.

        Malformed exits are skipped with a warning; they never stop construction.
        Rebuilding replaces the affected scenes' doorway lists (their state starts
        over, CLOSED); the shared transition cooldown is left as is.

        Args:
            scene_catalog: Scene definitions keyed by scene id. Not modified.
            spatial_index: Index each doorway is added to, or None to skip indexing.
            scene_ids: Only (re)build these scenes. None rebuilds the whole catalog.

        Returns:
            Number of doorways built.
        """
        if scene_ids is None:
            self.doorways_by_scene = {}
            scenes = list(scene_catalog.values())
        else:
            scenes = []
            for scene_id in scene_ids:
                scene = scene_catalog.get(scene_id)
                if scene is None:
                    logger.warning("Cannot build doorways for unknown scene '%s'", scene_id)
                    continue
                scenes.append(scene)

        built = 0
        for scene in scenes:
            doorways: list[Doorway] = []
            for index, exit_descriptor in enumerate(scene.exits):
                doorway = self._build_doorway(scene, index, exit_descriptor)
                if doorway is None:
                    continue
                self._warn_if_duplicate(doorways, doorway)
                doorways.append(doorway)
                doorway.register_in_index(spatial_index)

            self.doorways_by_scene[scene.scene_id] = doorways
            built += len(doorways)
            logger.debug("Built %d doorways for scene '%s'", len(doorways), scene.scene_id)

        logger.info("Doorways initialized: %d doorways in %d scenes", built, len(scenes))
        return built

    def _build_doorway(self, scene: SceneDefinition, index: int, exit_descriptor: ExitDescriptor) -> Doorway | None:
        """Create one doorway from an exit, or None (with a warning) if it is malformed."""
        direction = Direction.parse(exit_descriptor.direction)
        if direction is None:
            logger.warning(
                "Skipping exit %d of scene '%s': missing or unknown direction %r",
                index,
                scene.scene_id,
                exit_descriptor.direction,
            )
            return None

        if not exit_descriptor.target_scene_id:
            logger.warning("Skipping exit %d of scene '%s': missing target scene", index, scene.scene_id)
            return None

        try:
            kind = DoorwayKind(exit_descriptor.kind)
        except ValueError:
            logger.warning(
                "Skipping exit %d of scene '%s': unknown doorway kind %r",
                index,
                scene.scene_id,
                exit_descriptor.kind,
            )
            return None

        override = settings.DOORWAY_POSITION_OVERRIDES.get((scene.scene_id, direction.value))
        if override is not None:
            grid_x, grid_y = (float(value) for value in override)
            logger.debug(
                "Using authored position for %s door of scene '%s': (%.1f, %.1f)",
                direction.value,
                scene.scene_id,
                grid_x,
                grid_y,
            )
        else:
            grid_position = self._derive_grid_position(scene, exit_descriptor)
            if grid_position is None:
                logger.warning(
                    "Skipping exit %d of scene '%s': no gridX/gridY or position",
                    index,
                    scene.scene_id,
                )
                return None
            grid_x, grid_y = grid_position

        return Doorway(
            doorway_id=f"{scene.scene_id}_{index}",
            scene_id=scene.scene_id,
            direction=direction,
            target_scene_id=exit_descriptor.target_scene_id,
            kind=kind,
            grid_x=grid_x,
            grid_y=grid_y,
            wall_side=WallSide.from_direction(direction),
            label=exit_descriptor.label,
        )

    def _derive_grid_position(
        self,
        scene: SceneDefinition,
        exit_descriptor: ExitDescriptor,
    ) -> tuple[float, float] | None:
        """Grid position from gridX/gridY, falling back to the canvas-space position.

        A canvas position maps onto the SCENE_GRID_SIZE grid spanning the scene.
        """
        grid_x = exit_descriptor.grid_x
        grid_y = exit_descriptor.grid_y
        position = exit_descriptor.position
        grid_size = settings.SCENE_GRID_SIZE

        if grid_x is None and position is not None and scene.width:
            grid_x = position[0] / scene.width * grid_size
        if grid_y is None and position is not None and scene.height:
            grid_y = position[1] / scene.height * grid_size

        if grid_x is None or grid_y is None:
            return None
        return grid_x, grid_y

    def _warn_if_duplicate(self, doorways: list[Doorway], doorway: Doorway) -> None:
        """Log when a doorway lands on the same spot as an earlier one in its scene.

        Both are kept; the earlier one wins whenever the player reaches that spot.
        """
        for other in doorways:
            if (
                other.wall_side is doorway.wall_side
                and math.isclose(other.grid_x, doorway.grid_x)
                and math.isclose(other.grid_y, doorway.grid_y)
            ):
                logger.warning(
                    "Doorways %s and %s in scene '%s' share position (%.1f, %.1f)",
                    other.doorway_id,
                    doorway.doorway_id,
                    doorway.scene_id,
                    doorway.grid_x,
                    doorway.grid_y,
                )
                return

    def update(self, delta_time: float, context: GameContext) -> None:
        """Per-frame system hook; reads the player position and scene from the context.

        Without a player position only the transition cooldown advances.
        """
        if context.player_grid_position is None:
            self.transition_cooldown = max(0.0, self.transition_cooldown - delta_time)
            return
        player_grid_x, player_grid_y = context.player_grid_position
        self.update_doorways(delta_time, player_grid_x, player_grid_y, context.current_scene)

    def update_doorways(
        self,
        delta_time: float,
        player_grid_x: float,
        player_grid_y: float,
        current_scene_id: str,
    ) -> None:
        """Advance doorway state and trigger at most one scene load.

        Doorways are processed in list order. The shared cooldown is set the moment a
        portal fires, so later portals reached in the same frame are blocked.

        Args:
            delta_time: Seconds since the previous frame.
            player_grid_x: Player X position in grid units.
            player_grid_y: Player Y position in grid units.
            current_scene_id: Scene the player is in. Unknown scenes are a no-op.
        """
        self.transition_cooldown = max(0.0, self.transition_cooldown - delta_time)

        doorways = self.doorways_by_scene.get(current_scene_id)
        if not doorways:
            return

        scene_locked = current_scene_id in settings.DOORWAY_LOCKED_SCENES

        for doorway in doorways:
            is_near = doorway.is_player_colliding(player_grid_x, player_grid_y)
            new_state = doorway.update_state(delta_time, is_near)
            if new_state is not None:
                self._publish_state_change(doorway, new_state)

            if not is_near or doorway.kind is not DoorwayKind.PORTAL:
                continue
            if self.transition_cooldown > 0:
                continue
            if scene_locked:
                logger.debug("Scene '%s' is locked, portal %s stays inert", current_scene_id, doorway.doorway_id)
                continue

            self._trigger_transition(doorway)

    def _trigger_transition(self, doorway: Doorway) -> None:
        """Ask the scene manager to load the doorway's target and start the cooldown."""
        self.transition_cooldown = settings.DOORWAY_TRANSITION_COOLDOWN

        scene_manager = self._get_scene_manager()
        if scene_manager is None:
            logger.error("No scene manager available, cannot load scene '%s'", doorway.target_scene_id)
            return

        logger.info("Player entered doorway %s to '%s'", doorway.doorway_id, doorway.target_scene_id)
        scene_manager.load_scene(doorway.target_scene_id)

        if self._event_bus:
            self._event_bus.publish(DoorwayEnteredEvent(doorway.scene_id, doorway.doorway_id, doorway.target_scene_id))

    def _publish_state_change(self, doorway: Doorway, new_state: DoorwayState) -> None:
        logger.debug("Doorway %s is now %s", doorway.doorway_id, new_state.value)
        if not self._event_bus:
            return
        event_class = DoorwayOpenedEvent if new_state is DoorwayState.OPEN else DoorwayClosedEvent
        self._event_bus.publish(event_class(doorway.scene_id, doorway.doorway_id, doorway.target_scene_id))

    def _get_scene_manager(self) -> SceneBaseManager | None:
        if self._scene_manager is None and self._context is not None:
            return cast("SceneBaseManager | None", self._context.get_system("scene"))
        return self._scene_manager

    def get_active_doorways(self, scene_id: str | None) -> tuple[Doorway, ...]:
        """Get the doorways of a scene for rendering.

        Args:
            scene_id: Scene id. None or unknown ids give an empty tuple.

        Returns:
            The scene's doorways in exit order.
        """
        if not scene_id:
            return ()
        return tuple(self.doorways_by_scene.get(scene_id, ()))

    def force_doorway_state(self, scene_id: str, wall_side: WallSide, position: float, is_open: bool) -> int:
        """Force wall doorways open or closed (debugging helper).

        North-wall doorways are matched on grid_x, west-wall doorways on grid_y.

        Args:
            scene_id: Scene to search.
            wall_side: Wall the door is set into.
            position: Position of the door along that wall.
            is_open: Whether to open or close the matching doors.

        Returns:
            Number of doorways changed.
        """
        changed = 0
        for doorway in self.doorways_by_scene.get(scene_id, []):
            if doorway.kind is not DoorwayKind.WALL or doorway.wall_side is not wall_side:
                continue
            along_wall = doorway.grid_x if wall_side is WallSide.NORTH else doorway.grid_y
            if math.isclose(along_wall, position):
                doorway.force_state(is_open)
                changed += 1
                logger.debug(
                    "Forced %s %s door at %.1f %s",
                    scene_id,
                    wall_side.value,
                    position,
                    "OPEN" if is_open else "CLOSED",
                )
        return changed

    def clear(self) -> None:
        """Drop every doorway and reset the cooldown."""
        self.doorways_by_scene = {}
        self.transition_cooldown = 0.0

    def cleanup(self) -> None:
        """Release doorways and context references."""
        self.clear()
        self._context = None
