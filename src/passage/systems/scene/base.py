"""Base class for SceneManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING

from passage.systems.base import BaseSystem

if TYPE_CHECKING:
    from passage.scenes import SceneDefinition


class TransitionState(Enum):
    """Enum for scene transition states."""

    NONE = auto()  # No transition happening
    FADING_OUT = auto()  # Fading out old scene
    LOADING = auto()  # Loading new scene (internal state)
    FADING_IN = auto()  # Fading in new scene


class SceneBaseManager(BaseSystem, ABC):
    """Base class for SceneManager."""

    role = "scene_manager"

    @abstractmethod
    def load_scene(self, scene_id: str) -> None:
        """Request a transition to another scene."""
        ...

    @abstractmethod
    def get_current_scene(self) -> SceneDefinition | None:
        """Get the current scene definition."""
        ...

    @abstractmethod
    def get_transition_state(self) -> TransitionState:
        """Get transition state."""
        ...
