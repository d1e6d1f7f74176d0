"""Qt UI components for the quiz game."""

from .dialog_helpers import (
    confirm_logout,
    show_error,
    show_game_error,
    show_info,
    show_warning,
)
from .game_main_window import GameMainWindow
from .scores_dialog import ScoresDialog

__all__ = [
    "GameMainWindow",
    "ScoresDialog",
    "confirm_logout",
    "show_error",
    "show_game_error",
    "show_info",
    "show_warning",
]
