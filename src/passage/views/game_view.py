"""Main gameplay view.

The GameView owns the game context and the installed systems and drives them from
arcade's frame callbacks:

- on_update(): every system's update(), which moves doorways through their
  open/close state and lets floor portals request scene loads
- on_draw(): every system's world and UI draw hooks (the scene fade overlay)

The player collaborator reports its grid position through update_player_position()
before each frame.

Example usage:
    window = arcade.Window(1280, 720, "Passage")
    view = GameView()
    window.show_view(view)
    arcade.run()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from passage.conf import settings
from passage.events import EventBus
from passage.scenes import load_configured_catalog
from passage.systems.game_context import GameContext
from passage.systems.loader import SystemLoader

if TYPE_CHECKING:
    from passage.scenes import SceneCatalog

logger = logging.getLogger(__name__)


class GameView(arcade.View):
    """Gameplay view that runs the scene-connectivity systems each frame.

    Attributes:
        event_bus: Event bus shared by all systems.
        game_context: Context handed to every system, created in setup().
        system_loader: Loader holding the instantiated systems, created in setup().
    """

    def __init__(
        self,
        window: arcade.Window | None = None,
        scene_catalog: SceneCatalog | None = None,
        initial_scene: str | None = None,
    ) -> None:
        """Create the view.

        Args:
            window: Window to attach to. Defaults to the current arcade window.
            scene_catalog: Scene catalog to use. Defaults to load_configured_catalog().
            initial_scene: Scene to start in. Defaults to settings.INITIAL_SCENE.
        """
        super().__init__(window)
        self.scene_catalog = scene_catalog
        self.initial_scene = initial_scene
        self.event_bus = EventBus()
        self.game_context: GameContext | None = None
        self.system_loader: SystemLoader | None = None

    def setup(self) -> None:
        """Load the catalog, instantiate systems and enter the first scene."""
        catalog = self.scene_catalog if self.scene_catalog is not None else load_configured_catalog()

        self.game_context = GameContext(
            event_bus=self.event_bus,
            window=self.window,
            scene_catalog=catalog,
            current_scene=self.initial_scene or settings.INITIAL_SCENE,
        )

        self.system_loader = SystemLoader()
        self.system_loader.instantiate_all()
        self.system_loader.setup_all(self.game_context)
        logger.info("GameView ready in scene '%s'", self.game_context.current_scene)

    def update_player_position(self, grid_x: float, grid_y: float) -> None:
        """Report the player's grid position for the next frame."""
        if self.game_context:
            self.game_context.update_player_position(grid_x, grid_y)

    def on_show_view(self) -> None:
        """Set up systems the first time the view is shown."""
        if not self.system_loader:
            self.setup()

    def on_update(self, delta_time: float) -> None:
        """Advance every system by one frame."""
        if self.system_loader and self.game_context:
            self.system_loader.update_all(delta_time, self.game_context)

    def on_draw(self) -> None:
        """Draw every system, world layer first, then UI."""
        self.clear()
        if self.system_loader and self.game_context:
            self.system_loader.draw_all(self.game_context)
            self.system_loader.draw_ui_all(self.game_context)

    def cleanup(self) -> None:
        """Tear down systems and drop all event subscriptions."""
        if self.system_loader:
            self.system_loader.cleanup_all()
            self.system_loader = None
        self.event_bus.clear()
        self.game_context = None
