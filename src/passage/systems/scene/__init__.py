"""Scene management system.

This module provides the SceneManager class, which handles scene transitions and
rebuilds the doorways of each scene the player enters.
"""

from passage.systems.scene.base import SceneBaseManager, TransitionState
from passage.systems.scene.events import SceneStartEvent, SceneTransitionEvent
from passage.systems.scene.manager import SceneManager

__all__ = ["SceneBaseManager", "SceneManager", "SceneStartEvent", "SceneTransitionEvent", "TransitionState"]
