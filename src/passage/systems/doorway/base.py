"""Doorway classes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from passage.conf import settings
from passage.scenes.base import KIND_PORTAL, KIND_WALL
from passage.systems.base import BaseSystem

if TYPE_CHECKING:
    from passage.scenes import SceneCatalog
    from passage.systems.spatial.base import SpatialBaseIndex


class Direction(Enum):
    """Compass direction of an exit."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def parse(cls, value: str | None) -> Direction | None:
        """Parse a direction name or its first letter; None if unrecognised."""
        if not value:
            return None
        value = value.strip().lower()
        for direction in cls:
            if value in (direction.value, direction.value[0]):
                return direction
        return None


class WallSide(Enum):
    """The two doorway-bearing walls of a scene."""

    NORTH = "north"
    WEST = "west"

    @classmethod
    def from_direction(cls, direction: Direction) -> WallSide:
        """North and south exits sit on the north wall, east and west on the west wall."""
        if direction in (Direction.NORTH, Direction.SOUTH):
            return cls.NORTH
        return cls.WEST


class DoorwayKind(Enum):
    """How a doorway behaves when the player reaches it."""

    WALL = KIND_WALL  # opens and closes visually, never loads a scene
    PORTAL = KIND_PORTAL  # loads the target scene


class DoorwayState(Enum):
    """Open/closed state of a doorway."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass
class Doorway:
    """One traversable connection from a scene to another.

    A doorway is built once from an exit descriptor and keeps its position for its
    whole lifetime; only ``state`` and ``close_deadline`` change at runtime.

    The close delay is a deadline on the doorway's own clock (the sum of every
    delta_time it was updated with) rather than a scheduled callback, so cancelling
    a pending close is just clearing the field.

    Attributes:
        doorway_id: Identifier unique within the registry ("<scene>_<index>").
        scene_id: Scene the doorway belongs to.
        direction: Compass direction of the exit.
        target_scene_id: Scene the doorway leads to.
        kind: WALL doorways only animate; PORTAL doorways trigger transitions.
        grid_x: Grid X position.
        grid_y: Grid Y position.
        wall_side: Wall group derived from the direction; only WALL doorways use it.
        label: Display name of the destination.
        state: Current open/closed state.
        close_deadline: Clock time at which an open doorway closes, while the
            player is away from it.
        clock: Seconds of game time this doorway has been updated for.
    """

    doorway_id: str
    scene_id: str
    direction: Direction
    target_scene_id: str
    kind: DoorwayKind
    grid_x: float
    grid_y: float
    wall_side: WallSide | None = None
    label: str = ""
    state: DoorwayState = DoorwayState.CLOSED
    close_deadline: float | None = None
    clock: float = field(default=0.0, repr=False)

    @property
    def is_open(self) -> bool:
        """Whether the doorway is currently open."""
        return self.state is DoorwayState.OPEN

    @property
    def is_wall_doorway(self) -> bool:
        """Whether the doorway sits in a wall."""
        return self.kind is DoorwayKind.WALL

    def update_state(self, delta_time: float, is_player_near: bool) -> DoorwayState | None:
        """Advance the open/close state machine by one frame.

        Opening is immediate. Closing waits DOORWAY_CLOSE_DELAY seconds after the
        player leaves, and returning within that window cancels it.

        Args:
            delta_time: Seconds since the previous frame.
            is_player_near: Result of is_player_colliding() for this frame.

        Returns:
            The new state if it changed this frame, otherwise None.
        """
        self.clock += delta_time

        if is_player_near:
            self.close_deadline = None
            if self.state is DoorwayState.CLOSED:
                self.state = DoorwayState.OPEN
                return self.state
            return None

        if self.state is DoorwayState.CLOSED:
            return None

        if self.close_deadline is None:
            self.close_deadline = self.clock + settings.DOORWAY_CLOSE_DELAY
            return None

        if self.clock >= self.close_deadline:
            self.state = DoorwayState.CLOSED
            self.close_deadline = None
            return self.state

        return None

    def force_state(self, is_open: bool) -> None:
        """Set the state directly, dropping any pending close."""
        self.state = DoorwayState.OPEN if is_open else DoorwayState.CLOSED
        self.close_deadline = None

    def is_player_colliding(self, player_grid_x: float, player_grid_y: float) -> bool:
        """Check whether the player is close enough to use this doorway.

        The player must be closer than DOORWAY_PROXIMITY_THRESHOLD grid units. Wall
        doorways additionally require the player to be inside the corridor along
        their wall, so a door only reacts near the wall it is set into.

        Args:
            player_grid_x: Player X position in grid units.
            player_grid_y: Player Y position in grid units.

        Returns:
            True if the player is at the doorway.
        """
        if self.kind is DoorwayKind.WALL:
            depth = settings.DOORWAY_WALL_CORRIDOR_DEPTH
            if self.wall_side is WallSide.NORTH and player_grid_y > depth:
                return False
            if self.wall_side is WallSide.WEST and player_grid_x > depth:
                return False

        distance = math.hypot(self.grid_x - player_grid_x, self.grid_y - player_grid_y)
        return distance < settings.DOORWAY_PROXIMITY_THRESHOLD

    def world_position(self, cell_size: float) -> tuple[float, float]:
        """World-space position used for spatial indexing.

        Wall doorways are pinned to their wall (y=0 for the north wall, x=0 for the
        west wall); floor portals use their grid position.
        """
        if self.kind is DoorwayKind.WALL and self.wall_side is WallSide.NORTH:
            return self.grid_x * cell_size, 0.0
        if self.kind is DoorwayKind.WALL and self.wall_side is WallSide.WEST:
            return 0.0, self.grid_y * cell_size
        return self.grid_x * cell_size, self.grid_y * cell_size

    def register_in_index(self, spatial_index: SpatialBaseIndex | None) -> None:
        """Add this doorway to a spatial index; a missing index is ignored."""
        if spatial_index is None:
            return
        world_x, world_y = self.world_position(spatial_index.cell_size)
        spatial_index.add_entity(self, world_x, world_y)


class DoorwayBaseRegistry(BaseSystem, ABC):
    """Base class for DoorwayRegistry."""

    role = "doorway_registry"

    @abstractmethod
    def initialize(
        self,
        scene_catalog: SceneCatalog,
        spatial_index: SpatialBaseIndex | None,
        scene_ids: list[str] | None = None,
    ) -> int:
        """Build doorways from a scene catalog."""
        ...

    @abstractmethod
    def update_doorways(
        self,
        delta_time: float,
        player_grid_x: float,
        player_grid_y: float,
        current_scene_id: str,
    ) -> None:
        """Advance doorway state and trigger transitions for one frame."""
        ...

    @abstractmethod
    def get_active_doorways(self, scene_id: str | None) -> tuple[Doorway, ...]:
        """Get the doorways of a scene."""
        ...
