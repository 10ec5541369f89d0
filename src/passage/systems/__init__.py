"""Game systems for scene connectivity."""

from passage.systems.base import BaseSystem
from passage.systems.doorway import (
    Direction,
    Doorway,
    DoorwayClosedEvent,
    DoorwayEnteredEvent,
    DoorwayKind,
    DoorwayOpenedEvent,
    DoorwayRegistry,
    DoorwayState,
    WallSide,
)
from passage.systems.game_context import GameContext
from passage.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from passage.systems.registry import SystemRegistry
from passage.systems.scene import SceneManager, SceneStartEvent, SceneTransitionEvent, TransitionState
from passage.systems.spatial import SpatialGrid

__all__ = [
    "BaseSystem",
    "CircularDependencyError",
    "Direction",
    "Doorway",
    "DoorwayClosedEvent",
    "DoorwayEnteredEvent",
    "DoorwayKind",
    "DoorwayOpenedEvent",
    "DoorwayRegistry",
    "DoorwayState",
    "GameContext",
    "MissingDependencyError",
    "SceneManager",
    "SceneStartEvent",
    "SceneTransitionEvent",
    "SpatialGrid",
    "SystemLoader",
    "SystemRegistry",
    "TransitionState",
    "WallSide",
]
