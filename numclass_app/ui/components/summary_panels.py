"""Components for the results and game-over screens."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from numclass_app.constants.ui_constants import (
    BACK_TO_MENU_BUTTON,
    CONTINUE_BUTTON,
    GAME_OVER_TITLE,
    LEADERBOARD_BUTTON,
    RESULTS_CORRECT_TEMPLATE,
    RESULTS_TITLE,
    RESULTS_TOTAL_TEMPLATE,
    RESULTS_WRONG_TEMPLATE,
    SCORE_TEMPLATE,
    TIME_TEMPLATE,
)
from numclass_app.core.game_manager import SessionSnapshot
from numclass_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Shows the correct/wrong tally right after submission."""

    def __init__(self, on_continue: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_continue = on_continue
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(RESULTS_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.correct_label = QLabel(self)
        self.correct_label.setStyleSheet(Styles.get_result_style(correct=True))
        self.wrong_label = QLabel(self)
        self.wrong_label.setStyleSheet(Styles.get_result_style(correct=False))
        self.total_label = QLabel(self)
        self.time_label = QLabel(self)
        for label in (self.correct_label, self.wrong_label, self.total_label, self.time_label):
            label.setAlignment(Qt.AlignCenter)
            layout.addWidget(label)

        self.continue_button = QPushButton(CONTINUE_BUTTON, self)
        self.continue_button.clicked.connect(self.on_continue)
        layout.addWidget(self.continue_button)

    def render(self, snapshot: SessionSnapshot) -> None:
        results = snapshot.results
        if results is None:
            return
        self.correct_label.setText(RESULTS_CORRECT_TEMPLATE.format(count=results.correct))
        self.wrong_label.setText(RESULTS_WRONG_TEMPLATE.format(count=results.wrong))
        self.total_label.setText(RESULTS_TOTAL_TEMPLATE.format(count=results.total))
        self.time_label.setText(TIME_TEMPLATE.format(time=snapshot.elapsed_display))


class GameOverPanel(QWidget):
    """Final score with the way back to the menu or to the leaderboard."""

    def __init__(
        self,
        on_back_to_menu: Callable[[], None],
        on_leaderboard: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_back_to_menu = on_back_to_menu
        self.on_leaderboard = on_leaderboard
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(GAME_OVER_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel(self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.time_label = QLabel(self)
        self.time_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.time_label)

        self.menu_button = QPushButton(BACK_TO_MENU_BUTTON, self)
        self.menu_button.clicked.connect(self.on_back_to_menu)
        layout.addWidget(self.menu_button)

        self.leaderboard_button = QPushButton(LEADERBOARD_BUTTON, self)
        self.leaderboard_button.setStyleSheet(Styles.get_secondary_button_style())
        self.leaderboard_button.clicked.connect(self.on_leaderboard)
        layout.addWidget(self.leaderboard_button)

    def render(self, snapshot: SessionSnapshot) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=snapshot.score))
        self.time_label.setText(TIME_TEMPLATE.format(time=snapshot.elapsed_display))
