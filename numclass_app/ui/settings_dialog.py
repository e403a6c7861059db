"""Settings dialog for configuring game preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

_MAX_SEED = 2_147_483_647


class SettingsDialog(QDialog):
    """Dialog for configuring font sizes and the shuffle seed."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        game_font_size: int = 14,
        shuffle_seed: int | None = None,
        confirm_unplaced_submit: bool = True,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._shuffle_seed = shuffle_seed
        self._confirm_unplaced_submit = confirm_unplaced_submit

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, menus):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Game Font Size (numbers, categories):")
        game_font_label.setToolTip("Font size for the number cards and category names")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        font_layout.addLayout(game_font_row)

        layout.addWidget(font_group)

        game_group = QGroupBox("Game Settings")
        game_layout = QVBoxLayout()
        game_group.setLayout(game_layout)

        self.fixed_seed_checkbox = QCheckBox("Use a fixed shuffle seed (same numbers every game)")
        self.fixed_seed_checkbox.setChecked(self._shuffle_seed is not None)
        game_layout.addWidget(self.fixed_seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, _MAX_SEED)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self._shuffle_seed is not None)
        self.fixed_seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        game_layout.addLayout(seed_row)

        self.confirm_submit_checkbox = QCheckBox("Ask before submitting with unclassified numbers")
        self.confirm_submit_checkbox.setChecked(self._confirm_unplaced_submit)
        game_layout.addWidget(self.confirm_submit_checkbox)

        layout.addWidget(game_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        """Get the selected game font size."""
        return self.game_font_spinbox.value()

    def get_shuffle_seed(self) -> int | None:
        """Get the fixed seed, or None for a fresh shuffle every game."""
        if not self.fixed_seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()

    def get_confirm_unplaced_submit(self) -> bool:
        return self.confirm_submit_checkbox.isChecked()
