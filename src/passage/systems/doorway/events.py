"""Events for doorway system."""

from dataclasses import dataclass

from passage.events import Event


@dataclass
class DoorwayOpenedEvent(Event):
    """Fired when a doorway opens because the player reached it.

    Renderers subscribe to this to start door animations.

    Attributes:
        scene_id: Scene the doorway belongs to.
        doorway_id: Identifier of the doorway.
        target_scene_id: Scene the doorway leads to.
    """

    scene_id: str
    doorway_id: str
    target_scene_id: str


@dataclass
class DoorwayClosedEvent(Event):
    """Fired when an open doorway closes after the close delay ran out.

    Attributes:
        scene_id: Scene the doorway belongs to.
        doorway_id: Identifier of the doorway.
        target_scene_id: Scene the doorway leads to.
    """

    scene_id: str
    doorway_id: str
    target_scene_id: str


@dataclass
class DoorwayEnteredEvent(Event):
    """Fired when the player steps onto a floor portal and a scene load is requested.

    Published right after SceneManager.load_scene() was called, at most once per
    transition cooldown window.

    Attributes:
        scene_id: Scene the player is leaving.
        doorway_id: Identifier of the portal used.
        target_scene_id: Scene being loaded.
    """

    scene_id: str
    doorway_id: str
    target_scene_id: str
