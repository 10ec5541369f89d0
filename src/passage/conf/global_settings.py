"""Default settings for Passage.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from passage.conf import global_settings

    INITIAL_SCENE = "circuitSanctum"
    DOORWAY_LOCKED_SCENES = ["startRoom"]
"""

# Window settings
SCREEN_WIDTH = 1280
"""Width of the game window in pixels."""

SCREEN_HEIGHT = 720
"""Height of the game window in pixels."""

WINDOW_TITLE = "Passage"
"""Title displayed in the window title bar."""

# Asset settings
ASSETS_HANDLE = "game_assets"
"""Resource handle name for asset loading."""

# Scene settings
INITIAL_SCENE = "startRoom"
"""Scene id the game starts in."""

SCENE_CATALOG_FILE = ""
"""Path (relative to the assets handle) of a JSON scene catalog.

Empty string uses the built-in catalog from passage.scenes.data.
"""

SCENE_GRID_SIZE = 16
"""Number of grid units spanning a scene; used to derive doorway grid positions
from canvas-space exit positions."""

SCENE_DEFAULT_WIDTH = 800
"""Canvas width assumed for scenes that do not declare one."""

SCENE_DEFAULT_HEIGHT = 600
"""Canvas height assumed for scenes that do not declare one."""

SCENE_TRANSITION_SPEED = 3.0
"""Fade alpha change per second during scene transitions."""

# Spatial index settings
SPATIAL_CELL_SIZE = 32
"""Size of a spatial index cell in world units (one grid unit)."""

# Doorway settings
DOORWAY_PROXIMITY_THRESHOLD = 0.5
"""Distance in grid units below which the player is considered at a doorway."""

DOORWAY_CLOSE_DELAY = 0.8
"""Seconds an open doorway waits after the player leaves before closing."""

DOORWAY_TRANSITION_COOLDOWN = 0.5
"""Seconds after a scene load during which no other doorway may trigger one."""

DOORWAY_WALL_CORRIDOR_DEPTH = 5.0
"""How far (grid units) from its wall a player can be and still reach a wall doorway."""

DOORWAY_POSITION_OVERRIDES = {
    ("startRoom", "east"): (0.0, 5.3),
    ("neonPhylactery", "west"): (14.0, 6.3),
}
"""Authored doorway grid positions keyed by (scene_id, direction).

Consulted once when doorways are built; wins over gridX/gridY and position.
"""

DOORWAY_LOCKED_SCENES = []
"""Scene ids whose floor portals open but never start a scene transition."""

# Installed systems
INSTALLED_SYSTEMS = [
    "passage.systems.spatial",
    "passage.systems.doorway",
    "passage.systems.scene",
]
"""List of module paths to import for system registration.

Users can add custom systems by extending this list in their settings.py:

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.minimap",
    ]
"""
