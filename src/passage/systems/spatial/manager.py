"""Spatial partitioning for broad-phase entity lookup.

Entities are bucketed into square cells keyed by their rounded world position, so
finding what is near a point only touches the surrounding cells instead of every
entity in the scene.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, ClassVar

from passage.conf import settings
from passage.systems.registry import SystemRegistry
from passage.systems.spatial.base import SpatialBaseIndex

if TYPE_CHECKING:
    from passage.systems.game_context import GameContext

logger = logging.getLogger(__name__)

CellKey = tuple[int, int]


@SystemRegistry.register
class SpatialGrid(SpatialBaseIndex):
    """Uniform grid spatial index.

    Attributes:
        cell_size: Size of each cell in world units.
        cells: Entities per cell, keyed by (cell_x, cell_y).
    """

    name: ClassVar[str] = "spatial"
    dependencies: ClassVar[list[str]] = []

    def __init__(self, cell_size: float | None = None) -> None:
        """Initialize the grid.

        Args:
            cell_size: Cell size in world units. Defaults to settings.SPATIAL_CELL_SIZE.
        """
        if cell_size is None:
            cell_size = settings.SPATIAL_CELL_SIZE
        if cell_size <= 0:
            msg = f"Spatial cell size must be positive, got {cell_size}"
            raise ValueError(msg)
        self.cell_size = float(cell_size)
        self.cells: dict[CellKey, list[tuple[Any, float, float]]] = {}

    def setup(self, context: GameContext) -> None:
        """Start from an empty grid."""
        self.clear()

    def world_to_cell(self, world_x: float, world_y: float) -> CellKey:
        """Get the cell containing a world position."""
        return math.floor(world_x / self.cell_size + 0.5), math.floor(world_y / self.cell_size + 0.5)

    def cell_to_world(self, cell_x: int, cell_y: int) -> tuple[float, float]:
        """Get the world position of a cell's centre."""
        return (cell_x + 0.5) * self.cell_size, (cell_y + 0.5) * self.cell_size

    def add_entity(self, entity: Any, world_x: float, world_y: float) -> None:  # noqa: ANN401
        """Register an entity at a world position.

        Args:
            entity: Any object; identity is used for removal and de-duplication.
            world_x: World X position.
            world_y: World Y position.
        """
        key = self.world_to_cell(world_x, world_y)
        self.cells.setdefault(key, []).append((entity, world_x, world_y))
        logger.debug("Indexed %r at world (%.1f, %.1f) in cell %s", entity, world_x, world_y, key)

    def remove_entity(self, entity: Any) -> bool:  # noqa: ANN401
        """Remove every registration of an entity.

        Returns:
            True if the entity was found.
        """
        found = False
        for key in list(self.cells):
            remaining = [entry for entry in self.cells[key] if entry[0] is not entity]
            if len(remaining) != len(self.cells[key]):
                found = True
            if remaining:
                self.cells[key] = remaining
            else:
                del self.cells[key]
        return found

    def get_entities_in_cell(self, cell_x: int, cell_y: int) -> list[Any]:
        """Get the entities registered in one cell."""
        return [entry[0] for entry in self.cells.get((cell_x, cell_y), [])]

    def get_entities_near(self, world_x: float, world_y: float, cell_range: int = 2) -> list[Any]:
        """Get entities in the cells surrounding a world position.

        Args:
            world_x: World X position.
            world_y: World Y position.
            cell_range: How many cells to look in each direction.

        Returns:
            Each matching entity once, in cell scan order.
        """
        center_x, center_y = self.world_to_cell(world_x, world_y)
        result: list[Any] = []
        seen: set[int] = set()
        for offset_x in range(-cell_range, cell_range + 1):
            for offset_y in range(-cell_range, cell_range + 1):
                for entity, _x, _y in self.cells.get((center_x + offset_x, center_y + offset_y), []):
                    if id(entity) not in seen:
                        seen.add(id(entity))
                        result.append(entity)
        return result

    def clear(self) -> None:
        """Remove every entity from the grid."""
        self.cells = {}

    def cell_count(self) -> int:
        """Number of non-empty cells."""
        return len(self.cells)

    def entity_count(self) -> int:
        """Total number of registrations."""
        return sum(len(entries) for entries in self.cells.values())

    def cleanup(self) -> None:
        """Drop all entities."""
        self.clear()
