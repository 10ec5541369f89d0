"""Base class for SpatialGrid."""

from abc import ABC, abstractmethod
from typing import Any

from passage.systems.base import BaseSystem


class SpatialBaseIndex(BaseSystem, ABC):
    """Base class for spatial indexes.

    A spatial index is a broad-phase registry mapping world positions to entities.
    Doorways only ever call add_entity() on it.
    """

    role = "spatial_index"

    cell_size: float

    @abstractmethod
    def add_entity(self, entity: Any, world_x: float, world_y: float) -> None:  # noqa: ANN401
        """Register an entity at a world position."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every entity from the index."""
        ...
