"""Custom types for authored scene data."""

from typing import TypedDict


class PositionDict(TypedDict, total=False):
    """Canvas-space position of an exit."""

    x: float
    y: float


class ExitDescriptorDict(TypedDict, total=False):
    """Authored exit as it appears in a scene catalog file."""

    direction: str
    to: str
    gridX: float
    gridY: float
    position: PositionDict
    kind: str
    isWallDoorway: bool
    label: str


class SceneDict(TypedDict, total=False):
    """Authored scene as it appears in a scene catalog file."""

    id: str
    name: str
    width: float
    height: float
    exits: list[ExitDescriptorDict]
