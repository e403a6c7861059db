"""Qt UI components for the classification game."""

from .dialog_helpers import (
    confirm_submit_with_unplaced,
    show_info,
    show_warning,
)
from .leaderboard_dialog import LeaderboardDialog
from .main_window import GameMainWindow

__all__ = [
    "GameMainWindow",
    "LeaderboardDialog",
    "confirm_submit_with_unplaced",
    "show_info",
    "show_warning",
]
