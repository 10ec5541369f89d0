"""Events for scene system."""

from dataclasses import dataclass

from passage.events import Event


@dataclass
class SceneStartEvent(Event):
    """Fired when a scene becomes the current scene, including the first one.

    Attributes:
        scene_id: Id of the scene that started.
    """

    scene_id: str


@dataclass
class SceneTransitionEvent(Event):
    """Fired when the player moves from one scene to another.

    Published while the screen is fully faded out, after the new scene's doorways
    have been rebuilt and before SceneStartEvent.

    Attributes:
        from_scene: Id of the scene being left.
        to_scene: Id of the scene being entered.
    """

    from_scene: str
    to_scene: str
