"""Spatial index system.

This module provides the SpatialGrid class, a broad-phase registry mapping world
positions to entities.
"""

from passage.systems.spatial.base import SpatialBaseIndex
from passage.systems.spatial.manager import SpatialGrid

__all__ = ["SpatialBaseIndex", "SpatialGrid"]
