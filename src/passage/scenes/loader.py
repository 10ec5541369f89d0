"""Scene catalog loading.

A catalog file is JSON with a top-level "scenes" object keyed by scene id, or a
"scenes" list whose entries carry an "id"::

    {
        "scenes": {
            "room1": {
                "name": "Room 1",
                "width": 800,
                "height": 600,
                "exits": [{"direction": "east", "to": "room2", "gridX": 5, "gridY": 3}]
            }
        }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from passage.conf import settings
from passage.constants import asset_path
from passage.scenes.base import SceneCatalog, SceneDefinition
from passage.scenes.data import DEFAULT_SCENES

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class SceneCatalogError(Exception):
    """Raised when a scene catalog file cannot be read or is not valid JSON."""


def parse_scene_catalog(data: Mapping[str, Any]) -> SceneCatalog:
    """Build a SceneCatalog from already-decoded catalog data.

    Scenes that are not objects, or list entries without an id, are skipped with a
    warning so one bad scene does not take the whole catalog down.

    Args:
        data: Decoded catalog, either {"scenes": {...}} or a bare {id: scene} mapping.

    Returns:
        Scene definitions keyed by scene id, in authored order.
    """
    scenes = data.get("scenes", data)

    if isinstance(scenes, list):
        entries: list[tuple[Any, Any]] = [
            (item.get("id") if isinstance(item, dict) else None, item) for item in scenes
        ]
    elif isinstance(scenes, dict):
        entries = list(scenes.items())
    else:
        msg = f"Scene catalog 'scenes' must be an object or a list, got {type(scenes).__name__}"
        raise SceneCatalogError(msg)

    catalog: SceneCatalog = {}
    for scene_id, scene_data in entries:
        if not scene_id or not isinstance(scene_data, dict):
            logger.warning("Skipping malformed scene entry %r", scene_id)
            continue
        if scene_id in catalog:
            logger.warning("Duplicate scene id '%s' in catalog, keeping the last definition", scene_id)
        try:
            catalog[str(scene_id)] = SceneDefinition.from_dict(str(scene_id), scene_data)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping scene '%s': %s", scene_id, exc)

    logger.debug("Parsed scene catalog with %d scenes", len(catalog))
    return catalog


def load_scene_catalog(path: str | Path) -> SceneCatalog:
    """Load a scene catalog from a JSON file.

    Args:
        path: Filesystem path of the catalog file.

    Returns:
        Scene definitions keyed by scene id.

    Raises:
        SceneCatalogError: If the file cannot be read, is not valid JSON, or does not
            hold a JSON object.
    """
    catalog_path = Path(path)
    try:
        with catalog_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        msg = f"Cannot read scene catalog {catalog_path}"
        raise SceneCatalogError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Scene catalog {catalog_path} is not valid JSON: {exc}"
        raise SceneCatalogError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Scene catalog {catalog_path} must contain a JSON object"
        raise SceneCatalogError(msg)

    catalog = parse_scene_catalog(data)
    logger.info("Loaded %d scenes from %s", len(catalog), catalog_path)
    return catalog


def load_default_catalog() -> SceneCatalog:
    """Return the built-in scene catalog."""
    return parse_scene_catalog({"scenes": DEFAULT_SCENES})


def load_configured_catalog() -> SceneCatalog:
    """Load the catalog named by SCENE_CATALOG_FILE, or the built-in one when unset."""
    if not settings.SCENE_CATALOG_FILE:
        return load_default_catalog()
    return load_scene_catalog(asset_path(settings.SCENE_CATALOG_FILE))
