"""Component for the start screen: player name and menu buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from numclass_app.constants.ui_constants import (
    LEADERBOARD_BUTTON,
    NAME_PLACEHOLDER,
    START_BUTTON,
    START_TITLE,
)
from numclass_app.styling.styles import Styles


class StartPanel(QWidget):
    """Name entry plus the buttons leading into the game or the leaderboard."""

    def __init__(
        self,
        on_name_changed: Callable[[str], None],
        on_start: Callable[[], None],
        on_leaderboard: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_name_changed = on_name_changed
        self.on_start = on_start
        self.on_leaderboard = on_leaderboard
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(START_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(NAME_PLACEHOLDER)
        self.name_input.setAccessibleName("Player name")
        self.name_input.textChanged.connect(self._handle_name_changed)
        self.name_input.returnPressed.connect(self._handle_start_click)
        layout.addWidget(self.name_input)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)

        self.leaderboard_button = QPushButton(LEADERBOARD_BUTTON, self)
        self.leaderboard_button.setStyleSheet(Styles.get_secondary_button_style())
        self.leaderboard_button.clicked.connect(self.on_leaderboard)
        layout.addWidget(self.leaderboard_button)

    def _handle_name_changed(self, text: str) -> None:
        self.start_button.setEnabled(bool(text.strip()))
        self.on_name_changed(text)

    def _handle_start_click(self) -> None:
        if not self.name_input.text().strip():
            return
        self.on_start()

    def set_player_name(self, name: str) -> None:
        if self.name_input.text() != name:
            self.name_input.setText(name)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.name_input.setStyleSheet(style)
        self.start_button.setStyleSheet(style)
        self.leaderboard_button.setStyleSheet(Styles.get_secondary_button_style() + style)
