"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import arcade
import pytest

from passage.conf import settings
from passage.scenes import ExitDescriptor, SceneDefinition

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(scope="session", autouse=True)
def _setup_arcade_resources() -> Generator[None]:
    """Set up arcade resource handles for tests.

    Registers the game_assets resource handle so that asset_path() calls work in
    tests. The handle points at a temporary directory holding a small scene catalog.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_assets = Path(temp_dir)

        data_dir = temp_assets / "data"
        data_dir.mkdir(exist_ok=True)

        catalog_file = data_dir / "scenes.json"
        catalog_file.write_text(
            '{"scenes": {"room1": {"name": "Room 1", "exits": '
            '[{"direction": "east", "to": "room2", "gridX": 5, "gridY": 3}]}}}'
        )

        arcade.resources.add_resource_handle("game_assets", temp_assets.resolve())
        yield


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        ASSETS_HANDLE="game_assets",
        INITIAL_SCENE="room1",
        SCENE_CATALOG_FILE="",
        SCENE_GRID_SIZE=16,
        SCENE_DEFAULT_WIDTH=800,
        SCENE_DEFAULT_HEIGHT=600,
        SCENE_TRANSITION_SPEED=3.0,
        SPATIAL_CELL_SIZE=32,
        DOORWAY_PROXIMITY_THRESHOLD=0.5,
        DOORWAY_CLOSE_DELAY=0.8,
        DOORWAY_TRANSITION_COOLDOWN=0.5,
        DOORWAY_WALL_CORRIDOR_DEPTH=5.0,
        DOORWAY_POSITION_OVERRIDES={
            ("startRoom", "east"): (0.0, 5.3),
            ("neonPhylactery", "west"): (14.0, 6.3),
        },
        DOORWAY_LOCKED_SCENES=[],
    )
    yield
    # Reset settings after test
    settings._wrapped = None


@pytest.fixture
def two_room_catalog() -> dict[str, SceneDefinition]:
    """Two scenes joined by floor portals, plus a wall doorway in room1."""
    return {
        "room1": SceneDefinition(
            scene_id="room1",
            name="Room 1",
            width=800,
            height=600,
            exits=(
                ExitDescriptor(direction="east", target_scene_id="room2", grid_x=5, grid_y=3),
                ExitDescriptor(direction="north", target_scene_id="room3", grid_x=8, grid_y=0, kind="wall"),
            ),
        ),
        "room2": SceneDefinition(
            scene_id="room2",
            name="Room 2",
            width=800,
            height=600,
            exits=(ExitDescriptor(direction="west", target_scene_id="room1", grid_x=1, grid_y=3),),
        ),
    }
