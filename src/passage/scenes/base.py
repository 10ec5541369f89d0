"""Scene catalog data classes.

Scenes and their exits are authored data: they are parsed once from a catalog and
never mutated afterwards. Doorways are derived from them by the DoorwayRegistry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from passage.conf import settings

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

KIND_WALL = "wall"
KIND_PORTAL = "portal"


def _optional_float(value: Any) -> float | None:  # noqa: ANN401
    """Convert a catalog number; None for missing or unparseable values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric catalog value %r", value)
        return None


@dataclass(frozen=True)
class ExitDescriptor:
    """One authored exit from a scene.

    Descriptors are validated leniently: a missing direction or target is kept as
    None so that the DoorwayRegistry can skip the exit with a diagnostic instead
    of the whole catalog failing to load.

    Attributes:
        direction: Compass direction of the exit ("north", "south", "east", "west").
        target_scene_id: Scene the exit leads to.
        grid_x: Authored grid X position, if any.
        grid_y: Authored grid Y position, if any.
        position: Canvas-space (x, y) position used when no grid position is authored.
        kind: "wall" for a doorway set into a wall, "portal" for a floor portal.
        label: Free-form display name of the destination.
    """

    direction: str | None
    target_scene_id: str | None
    grid_x: float | None = None
    grid_y: float | None = None
    position: tuple[float, float] | None = None
    kind: str = KIND_PORTAL
    label: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExitDescriptor:
        """Create an exit descriptor from catalog data.

        Accepts "to", "target" or "targetSceneId" for the destination and the legacy
        ``isWallDoorway`` flag as an alternative to ``kind``.
        """
        target = data.get("to", data.get("target", data.get("targetSceneId")))

        position = None
        raw_position = data.get("position")
        if isinstance(raw_position, dict):
            x = _optional_float(raw_position.get("x", 0.0))
            y = _optional_float(raw_position.get("y", 0.0))
            if x is not None and y is not None:
                position = (x, y)

        kind = data.get("kind")
        if not kind:
            kind = KIND_WALL if data.get("isWallDoorway") else KIND_PORTAL

        direction = data.get("direction")
        return cls(
            direction=str(direction).lower() if direction else None,
            target_scene_id=str(target) if target else None,
            grid_x=_optional_float(data.get("gridX", data.get("grid_x"))),
            grid_y=_optional_float(data.get("gridY", data.get("grid_y"))),
            position=position,
            kind=str(kind).lower(),
            label=str(data.get("label", "")),
        )


@dataclass(frozen=True)
class SceneDefinition:
    """A scene and its ordered exits.

    Attributes:
        scene_id: Unique scene identifier.
        name: Human-readable name.
        width: Canvas width, used to convert exit positions to grid units.
        height: Canvas height, used to convert exit positions to grid units.
        exits: Exit descriptors in authored order.
    """

    scene_id: str
    name: str = ""
    width: float = 0.0
    height: float = 0.0
    exits: tuple[ExitDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, scene_id: str, data: Mapping[str, Any]) -> SceneDefinition:
        """Create a scene definition from catalog data.

        Missing dimensions fall back to SCENE_DEFAULT_WIDTH / SCENE_DEFAULT_HEIGHT.
        Unparseable dimensions are treated as missing. Exit entries that are not
        objects are dropped here; everything else is left for the DoorwayRegistry
        to judge.
        """
        raw_exits = data.get("exits") or []
        if not isinstance(raw_exits, (list, tuple)):
            logger.warning("Ignoring exits of scene '%s': expected a list, got %s", scene_id, type(raw_exits).__name__)
            raw_exits = []
        exits = tuple(ExitDescriptor.from_dict(item) for item in raw_exits if isinstance(item, dict))
        return cls(
            scene_id=scene_id,
            name=str(data.get("name", scene_id)),
            width=_optional_float(data.get("width")) or float(settings.SCENE_DEFAULT_WIDTH),
            height=_optional_float(data.get("height")) or float(settings.SCENE_DEFAULT_HEIGHT),
            exits=exits,
        )


SceneCatalog = dict[str, SceneDefinition]
"""Scene definitions keyed by scene id."""
