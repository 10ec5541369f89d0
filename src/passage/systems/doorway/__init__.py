"""Doorway system.

This module provides the Doorway record and the DoorwayRegistry that builds doorways
from scene exits and drives them every frame.
"""

from passage.systems.doorway.base import (
    Direction,
    Doorway,
    DoorwayBaseRegistry,
    DoorwayKind,
    DoorwayState,
    WallSide,
)
from passage.systems.doorway.events import DoorwayClosedEvent, DoorwayEnteredEvent, DoorwayOpenedEvent
from passage.systems.doorway.manager import DoorwayRegistry

__all__ = [
    "Direction",
    "Doorway",
    "DoorwayBaseRegistry",
    "DoorwayClosedEvent",
    "DoorwayEnteredEvent",
    "DoorwayKind",
    "DoorwayOpenedEvent",
    "DoorwayRegistry",
    "DoorwayState",
    "WallSide",
]
