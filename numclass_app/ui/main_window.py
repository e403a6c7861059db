"""Qt main window driving the classification game through its phases."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from numclass_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    QUESTION_BANK_HELP_TEXT,
)
from numclass_app.constants.ui_constants import (
    ABOUT_BUTTON,
    INSTRUCTIONS_TITLE,
    SETTINGS_BUTTON,
    STATE_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from numclass_app.core.game_manager import GameManager, SessionSnapshot
from numclass_app.core.models import GamePhase
from numclass_app.styling.styles import Styles
from numclass_app.ui.components.instructions_panel import InstructionsPanel
from numclass_app.ui.components.playing_panel import PlayingPanel
from numclass_app.ui.components.start_panel import StartPanel
from numclass_app.ui.components.summary_panels import GameOverPanel, ResultsPanel
from numclass_app.ui.dialog_helpers import confirm_submit_with_unplaced, show_info, show_warning
from numclass_app.ui.leaderboard_dialog import LeaderboardDialog
from numclass_app.ui.settings_dialog import SettingsDialog


class GameMainWindow(QMainWindow):
    """Main Qt window rendering one page per game phase."""

    def __init__(self, game_manager: GameManager, shuffle_seed: int | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 720)

        self.game_manager = game_manager

        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._shuffle_seed: int | None = shuffle_seed
        self._confirm_unplaced_submit: bool = True
        self._rendered_phase: GamePhase | None = None

        self._build_ui()
        self._configure_refresh_timer()
        self._apply_styles()
        self._render()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.page_stack = QStackedWidget(self)

        self.start_panel = StartPanel(
            on_name_changed=self.game_manager.set_player_name,
            on_start=self._handle_start_game,
            on_leaderboard=self._handle_show_leaderboard,
            parent=self,
        )
        self.instructions_panel = InstructionsPanel(
            on_close=self.game_manager.dismiss_instructions,
            on_start=self._handle_start_game,
            parent=self,
        )
        self.playing_panel = PlayingPanel(
            on_select_number=self.game_manager.select_number,
            on_place=self.game_manager.place_in_category,
            on_remove=self.game_manager.remove_from_category,
            on_submit=self._handle_submit,
            parent=self,
        )
        self.playing_panel.set_categories(self.game_manager.get_categories())
        self.results_panel = ResultsPanel(on_continue=self.game_manager.continue_after_results, parent=self)
        self.game_over_panel = GameOverPanel(
            on_back_to_menu=self.game_manager.return_to_start,
            on_leaderboard=self._handle_show_leaderboard,
            parent=self,
        )

        self._pages = {
            GamePhase.START: self.start_panel,
            GamePhase.INSTRUCTIONS: self.instructions_panel,
            GamePhase.PLAYING: self.playing_panel,
            GamePhase.RESULTS: self.results_panel,
            GamePhase.GAME_OVER: self.game_over_panel,
        }
        for page in self._pages.values():
            self.page_stack.addWidget(page)

        root_layout.addWidget(self.page_stack)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.help_button = QPushButton(INSTRUCTIONS_TITLE, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATE_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._render)
        self.refresh_timer.start()

    def _render(self) -> None:
        snapshot = self.game_manager.snapshot()
        if snapshot.phase is not self._rendered_phase:
            self._enter_phase(snapshot)
        self.help_button.setEnabled(snapshot.phase is GamePhase.START)

        if snapshot.phase is GamePhase.START:
            self.start_panel.set_player_name(snapshot.player_name)
        elif snapshot.phase is GamePhase.PLAYING:
            self.playing_panel.render(snapshot)
        elif snapshot.phase is GamePhase.RESULTS:
            self.results_panel.render(snapshot)
        elif snapshot.phase is GamePhase.GAME_OVER:
            self.game_over_panel.render(snapshot)

    def _enter_phase(self, snapshot: SessionSnapshot) -> None:
        self._rendered_phase = snapshot.phase
        if snapshot.phase is GamePhase.PLAYING:
            self.playing_panel.reset_state()
        self.page_stack.setCurrentWidget(self._pages[snapshot.phase])

    def _handle_start_game(self) -> None:
        if self._shuffle_seed is not None:
            self.game_manager.set_shuffle_seed(self._shuffle_seed)
        if not self.game_manager.start_game():
            show_warning(self, "Cannot start", "Enter your name before starting the game.")
            return
        self._render()

    def _handle_submit(self) -> None:
        snapshot = self.game_manager.snapshot()
        unplaced = len(snapshot.pool)
        if unplaced and self._confirm_unplaced_submit:
            if not confirm_submit_with_unplaced(self, unplaced):
                return
        self.game_manager.submit()
        self._render()

    def _handle_show_leaderboard(self) -> None:
        if not self.game_manager.open_leaderboard():
            return
        try:
            dialog = LeaderboardDialog(self.game_manager.get_leaderboard(), self)
            dialog.exec()
        finally:
            self.game_manager.close_leaderboard()

    def _handle_help(self) -> None:
        if not self.game_manager.go_to_instructions():
            show_warning(self, "Cannot open instructions", "Enter your name first.")
            return
        self._render()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"{QUESTION_BANK_HELP_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._shuffle_seed,
            self._confirm_unplaced_submit,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()
            self._confirm_unplaced_submit = dialog.get_confirm_unplaced_submit()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.help_button, self.about_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.start_panel.apply_font_size(self._game_font_size)
        self.instructions_panel.apply_font_size(self._game_font_size)
        self.playing_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.refresh_timer.stop()
        self.game_manager.shutdown()
        super().closeEvent(event)
