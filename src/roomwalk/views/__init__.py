"""Views for the demo."""

from roomwalk.views.game_view import GameView

__all__ = ["GameView"]
