"""Scene management system for handling scene transitions.

This module provides the SceneManager class, which manages the high-level state of the
game scenes, including:
- Tracking the current scene
- Handling visual transitions (fade out / fade in) between scenes
- Rebuilding the spatial index and the new scene's doorways on every switch
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, cast

import arcade

from passage.conf import settings
from passage.systems.registry import SystemRegistry
from passage.systems.scene.base import SceneBaseManager, TransitionState
from passage.systems.scene.events import SceneStartEvent, SceneTransitionEvent

if TYPE_CHECKING:
    from passage.scenes import SceneDefinition
    from passage.systems.doorway.base import DoorwayBaseRegistry
    from passage.systems.game_context import GameContext
    from passage.systems.spatial.base import SpatialBaseIndex

logger = logging.getLogger(__name__)


@SystemRegistry.register
class SceneManager(SceneBaseManager):
    """Manages the current scene and transitions between scenes.

    Responsibilities:
    - Handle load_scene(scene_id) requests from doorways
    - Manage transition state machine (FADING_OUT -> LOADING -> FADING_IN -> NONE)
    - On the switch: update the context, reset the spatial index, rebuild the new
      scene's doorways and publish scene events
    - Render transition overlay

    Attributes:
        current_scene_id: Id of the current scene, or None before the first scene.
        transition_state: Current phase of the fade.
        transition_alpha: Overlay opacity, 0.0 transparent to 1.0 opaque.
        transition_speed: Alpha change per second.
        pending_scene_id: Scene to switch to once fully faded out.
    """

    name: ClassVar[str] = "scene"
    dependencies: ClassVar[list[str]] = ["spatial", "doorway"]

    def __init__(self) -> None:
        """Initialize the scene manager."""
        self.current_scene_id: str | None = None

        # Transition state
        self.transition_state: TransitionState = TransitionState.NONE
        self.transition_alpha: float = 0.0
        self.transition_speed: float = settings.SCENE_TRANSITION_SPEED

        # Pending transition data
        self.pending_scene_id: str | None = None

        self._context: GameContext | None = None

    def setup(self, context: GameContext) -> None:
        """Enter the context's current scene, or INITIAL_SCENE when none is set."""
        self._context = context
        self.transition_speed = settings.SCENE_TRANSITION_SPEED
        self.start(context.current_scene or settings.INITIAL_SCENE)

    def start(self, scene_id: str) -> None:
        """Switch to a scene immediately, without a fade.

        Args:
            scene_id: Scene to enter.
        """
        if self._context is None:
            logger.error("SceneManager: Context not initialized, cannot start scene %s", scene_id)
            return
        if scene_id not in self._context.scene_catalog:
            logger.error("SceneManager: Unknown scene '%s'", scene_id)
            return
        self._switch_scene(scene_id, self._context)

    def load_scene(self, scene_id: str) -> None:
        """Request a transition to a new scene.

        Requests made while a transition is running, or for scenes missing from the
        catalog, are logged and ignored.

        Args:
            scene_id: Id of the scene to load.
        """
        if self.transition_state != TransitionState.NONE:
            logger.warning("Transition already in progress, ignoring request to %s", scene_id)
            return

        if self._context is not None and scene_id not in self._context.scene_catalog:
            logger.error("SceneManager: Cannot load unknown scene '%s'", scene_id)
            return

        logger.info("Starting scene transition to %s", scene_id)
        self.pending_scene_id = scene_id
        self.transition_state = TransitionState.FADING_OUT
        self.transition_alpha = 0.0

    def get_current_scene(self) -> SceneDefinition | None:
        """Get the current scene definition, or None before the first scene."""
        if self._context is None or self.current_scene_id is None:
            return None
        return self._context.scene_catalog.get(self.current_scene_id)

    def get_transition_state(self) -> TransitionState:
        """Get transition state."""
        return self.transition_state

    def update(self, delta_time: float, context: GameContext) -> None:
        """Update transition state."""
        if self.transition_state == TransitionState.NONE:
            return

        if self.transition_state == TransitionState.FADING_OUT:
            self.transition_alpha += self.transition_speed * delta_time
            if self.transition_alpha >= 1.0:
                self.transition_alpha = 1.0
                self.transition_state = TransitionState.LOADING

                # Perform the scene switch while the screen is black
                self._perform_scene_switch(context)

                self.transition_state = TransitionState.FADING_IN

        elif self.transition_state == TransitionState.FADING_IN:
            self.transition_alpha -= self.transition_speed * delta_time
            if self.transition_alpha <= 0.0:
                self.transition_alpha = 0.0
                self.transition_state = TransitionState.NONE
                logger.info("Transition complete")

    def _perform_scene_switch(self, context: GameContext) -> None:
        """Execute the switch to the pending scene."""
        if not self.pending_scene_id:
            return

        scene_id = self.pending_scene_id

        # Clear pending before loading to avoid re-entry issues
        self.pending_scene_id = None

        self._switch_scene(scene_id, context)

    def _switch_scene(self, scene_id: str, context: GameContext) -> None:
        """Make a scene current and rebuild everything that depends on it."""
        previous_scene_id = self.current_scene_id
        logger.info("SceneManager: Entering scene %s", scene_id)

        self.current_scene_id = scene_id
        context.update_scene(scene_id)

        spatial_index = cast("SpatialBaseIndex | None", context.get_system("spatial"))
        if spatial_index:
            spatial_index.clear()

        doorway_registry = cast("DoorwayBaseRegistry | None", context.get_system("doorway"))
        if doorway_registry:
            doorway_registry.initialize(context.scene_catalog, spatial_index, scene_ids=[scene_id])

        if previous_scene_id is not None and previous_scene_id != scene_id:
            context.event_bus.publish(SceneTransitionEvent(previous_scene_id, scene_id))
        context.event_bus.publish(SceneStartEvent(scene_id))

    def on_draw_ui(self, context: GameContext) -> None:
        """Draw the black fade overlay while transitioning."""
        if self.transition_state == TransitionState.NONE or context.window is None:
            return

        alpha = int(self.transition_alpha * 255)
        # alpha clamped 0-255
        alpha = max(0, min(255, alpha))

        arcade.draw_lrbt_rectangle_filled(
            0,
            context.window.width,
            0,
            context.window.height,
            (0, 0, 0, alpha),
        )

    def cleanup(self) -> None:
        """Forget the context and any pending transition."""
        self.pending_scene_id = None
        self.transition_state = TransitionState.NONE
        self._context = None
