"""Built-in scene catalog.

Used when SCENE_CATALOG_FILE is empty. The layout mirrors the catalog file format
so it goes through the same parser as authored JSON.
"""

from passage.types import SceneDict

DEFAULT_SCENES: dict[str, SceneDict] = {
    "startRoom": {
        "name": "Start Room",
        "width": 400,
        "height": 300,
        "exits": [
            {
                "direction": "north",
                "to": "circuitSanctum",
                "kind": "wall",
                "position": {"x": 200, "y": 0},
                "gridX": 8,
                "gridY": 0,
                "label": "Circuit Sanctum",
            },
            {
                # Placed by DOORWAY_POSITION_OVERRIDES
                "direction": "east",
                "to": "neonPhylactery",
                "kind": "wall",
                "position": {"x": 400, "y": 150},
                "label": "Neon Phylactery",
            },
            {
                "direction": "north",
                "to": "circuitSanctum",
                "kind": "portal",
                "position": {"x": 180, "y": 100},
                "label": "Circuit Sanctum",
            },
        ],
    },
    "circuitSanctum": {
        "name": "Circuit Sanctum",
        "width": 800,
        "height": 600,
        "exits": [
            {
                "direction": "south",
                "to": "startRoom",
                "kind": "portal",
                "position": {"x": 400, "y": 600},
                "gridX": 8,
                "gridY": 14,
                "label": "Nexus Core",
            },
        ],
    },
    "neonPhylactery": {
        "name": "Neon Phylactery",
        "width": 800,
        "height": 600,
        "exits": [
            {
                "direction": "west",
                "to": "startRoom",
                "kind": "portal",
                "position": {"x": 0, "y": 300},
                "gridX": 14,
                "gridY": 6.3,
                "label": "Nexus Core",
            },
        ],
    },
}
