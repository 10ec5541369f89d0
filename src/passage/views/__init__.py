"""Views for the game loop."""

from passage.views.game_view import GameView

__all__ = ["GameView"]
