"""Static scene catalog: authored scenes and their exits."""

from passage.scenes.base import KIND_PORTAL, KIND_WALL, ExitDescriptor, SceneCatalog, SceneDefinition
from passage.scenes.loader import (
    SceneCatalogError,
    load_configured_catalog,
    load_default_catalog,
    load_scene_catalog,
    parse_scene_catalog,
)

__all__ = [
    "KIND_PORTAL",
    "KIND_WALL",
    "ExitDescriptor",
    "SceneCatalog",
    "SceneCatalogError",
    "SceneDefinition",
    "load_configured_catalog",
    "load_default_catalog",
    "load_scene_catalog",
    "parse_scene_catalog",
]
