"""Modal dialog listing the saved high scores."""

from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from numclass_app.constants.ui_constants import (
    BACK_BUTTON,
    LEADERBOARD_EMPTY_MESSAGE,
    LEADERBOARD_TITLE,
)
from numclass_app.core.models import LeaderboardEntry
from numclass_app.styling.styles import Styles


def _format_entry(rank: int, entry: LeaderboardEntry) -> str:
    try:
        played_on = datetime.fromisoformat(entry.date).strftime("%Y-%m-%d")
    except ValueError:
        played_on = entry.date
    return f"{rank}. {entry.name} - {entry.score} ({played_on})"


class LeaderboardDialog(QDialog):
    """Read-only view of the leaderboard entries, best first."""

    def __init__(self, entries: list[LeaderboardEntry], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(LEADERBOARD_TITLE)
        self.setModal(True)
        self.setMinimumWidth(360)

        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(LEADERBOARD_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        if entries:
            self.entry_list = QListWidget(self)
            self.entry_list.setAlternatingRowColors(True)
            for rank, entry in enumerate(entries, start=1):
                QListWidgetItem(_format_entry(rank, entry), self.entry_list)
            layout.addWidget(self.entry_list, stretch=1)
        else:
            empty_label = QLabel(LEADERBOARD_EMPTY_MESSAGE, self)
            empty_label.setAlignment(Qt.AlignCenter)
            layout.addWidget(empty_label)

        back_button = QPushButton(BACK_BUTTON, self)
        back_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        layout.addWidget(back_button)
