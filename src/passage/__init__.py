"""Passage - scene connectivity for isometric games built on Arcade.

This package decides when a doorway can be used, opens and closes doors as the
player approaches them, and moves the player between scenes:
- Doorways built from the exits authored in a scene catalog
- Zero-delay opening and delayed, cancellable closing
- Floor portals that load their target scene, rate limited by a shared cooldown
- A spatial index every doorway is registered into
- Faded scene transitions

Quick start:
    # Create a settings.py file in your project root:
    # INITIAL_SCENE = "startRoom"
    # SCENE_CATALOG_FILE = "data/scenes.json"

    from passage import run_game

    if __name__ == "__main__":
        run_game()

Driving the registry directly:
    from passage import DoorwayRegistry, SpatialGrid, load_default_catalog

    registry = DoorwayRegistry(scene_manager=my_scene_manager)
    registry.initialize(load_default_catalog(), SpatialGrid())

    # every frame
    registry.update_doorways(delta_time, player_x, player_y, "startRoom")
"""

__version__ = "0.1.0"

from passage.conf import settings
from passage.events import Event, EventBus
from passage.helpers import create_game, run_game
from passage.scenes import (
    ExitDescriptor,
    SceneCatalogError,
    SceneDefinition,
    load_default_catalog,
    load_scene_catalog,
)
from passage.systems import (
    Doorway,
    DoorwayKind,
    DoorwayRegistry,
    DoorwayState,
    GameContext,
    SceneManager,
    SpatialGrid,
    SystemLoader,
    WallSide,
)
from passage.views import GameView

__all__ = [
    "Doorway",
    "DoorwayKind",
    "DoorwayRegistry",
    "DoorwayState",
    "Event",
    "EventBus",
    "ExitDescriptor",
    "GameContext",
    "GameView",
    "SceneCatalogError",
    "SceneDefinition",
    "SceneManager",
    "SpatialGrid",
    "SystemLoader",
    "WallSide",
    "__version__",
    "create_game",
    "load_default_catalog",
    "load_scene_catalog",
    "run_game",
    "settings",
]
