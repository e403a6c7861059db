"""Component showing how to play before the board is dealt."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from numclass_app.constants.ui_constants import (
    INSTRUCTIONS_CLOSE_BUTTON,
    INSTRUCTIONS_TITLE,
    START_BUTTON,
)
from numclass_app.core.content_renderer import renderer
from numclass_app.styling.styles import Styles


class InstructionsPanel(QWidget):
    """Rendered instructions with close and start actions."""

    def __init__(
        self,
        on_close: Callable[[], None],
        on_start: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_close = on_close
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel(INSTRUCTIONS_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label)
        header_row.addStretch()
        self.close_button = QPushButton(INSTRUCTIONS_CLOSE_BUTTON, self)
        self.close_button.setAccessibleName("Close instructions")
        self.close_button.setStyleSheet(Styles.get_secondary_button_style())
        self.close_button.clicked.connect(self.on_close)
        header_row.addWidget(self.close_button)
        layout.addLayout(header_row)

        self.body_label = QLabel(self)
        self.body_label.setTextFormat(Qt.RichText)
        self.body_label.setWordWrap(True)
        self.body_label.setText(renderer.render_instructions())
        layout.addWidget(self.body_label, stretch=1)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button)

    def apply_font_size(self, font_size: int) -> None:
        self.body_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.start_button.setStyleSheet(f"font-size: {font_size}pt;")
