"""Component for the classification board shown while a game is running."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from numclass_app.constants.ui_constants import (
    CATEGORIES_TITLE,
    CLASSIFIED_TEMPLATE,
    NUMBERS_TITLE,
    SUBMIT_BUTTON,
    TIME_TEMPLATE,
)
from numclass_app.core.content_renderer import renderer
from numclass_app.core.game_manager import SessionSnapshot
from numclass_app.core.models import Category
from numclass_app.styling.styles import Styles

_NUMBER_COLUMNS = 4
_CATEGORY_COLUMNS = 2
_CHIP_COLUMNS = 4


def _clear_layout(layout: QGridLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


class CategoryCard(QFrame):
    """Clickable drop zone listing the numbers placed in one category."""

    def __init__(
        self,
        category: Category,
        on_place: Callable[[str], None],
        on_remove: Callable[[str, str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.category = category
        self.on_place = on_place
        self.on_remove = on_remove
        self._numbers: list[str] = []

        self.setObjectName("categoryCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setAccessibleName(f"Drop numbers here for {category.name}")
        self.setStyleSheet(f"#categoryCard {{ {Styles.get_category_card_style()} }}")
        self.setFrameShape(QFrame.StyledPanel)

        layout = QVBoxLayout()
        self.setLayout(layout)

        self.name_label = QLabel(category.name, self)
        self.name_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.name_label)

        self.description_label = QLabel(self)
        self.description_label.setTextFormat(Qt.RichText)
        self.description_label.setWordWrap(True)
        self.description_label.setText(renderer.render_inline(category.description))
        self.description_label.setStyleSheet("font-size: 11px;")
        layout.addWidget(self.description_label)

        self.chip_layout = QGridLayout()
        layout.addLayout(self.chip_layout)

    def mousePressEvent(self, event) -> None:  # noqa: N802 - Qt override
        if event.button() == Qt.LeftButton:
            self.on_place(self.category.id)
        super().mousePressEvent(event)

    def set_numbers(self, numbers: list[str]) -> None:
        if numbers == self._numbers:
            return
        self._numbers = list(numbers)
        _clear_layout(self.chip_layout)
        for index, number in enumerate(numbers):
            chip = QPushButton(number, self)
            chip.setStyleSheet(Styles.get_chip_style())
            chip.setAccessibleName(f"Remove number {number} from {self.category.name}")
            chip.clicked.connect(
                lambda _checked=False, n=number: self.on_remove(n, self.category.id)
            )
            self.chip_layout.addWidget(chip, index // _CHIP_COLUMNS, index % _CHIP_COLUMNS)


class PlayingPanel(QWidget):
    """Top bar with timer and submit, the number pool and the category cards."""

    def __init__(
        self,
        on_select_number: Callable[[str], None],
        on_place: Callable[[str], None],
        on_remove: Callable[[str, str], None],
        on_submit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select_number = on_select_number
        self.on_place = on_place
        self.on_remove = on_remove
        self.on_submit = on_submit

        self._game_font_size: int = 14
        self._pool_snapshot: tuple[list[str], str | None] | None = None
        self._category_cards: dict[str, CategoryCard] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_row = QHBoxLayout()
        self.player_label = QLabel("", self)
        self.player_label.setStyleSheet("font-weight: bold;")
        top_row.addWidget(self.player_label)
        top_row.addStretch()
        self.time_label = QLabel("", self)
        self.time_label.setAccessibleName("Elapsed Time")
        top_row.addWidget(self.time_label)
        self.classified_label = QLabel("", self)
        self.classified_label.setAccessibleName("Classified Numbers")
        top_row.addWidget(self.classified_label)
        top_row.addStretch()
        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setAccessibleName("Submit Answers")
        self.submit_button.setStyleSheet(Styles.get_submit_button_style())
        self.submit_button.clicked.connect(self.on_submit)
        top_row.addWidget(self.submit_button)
        layout.addLayout(top_row)

        board_row = QHBoxLayout()

        self.numbers_group = QGroupBox(NUMBERS_TITLE, self)
        self.numbers_layout = QGridLayout()
        self.numbers_group.setLayout(self.numbers_layout)
        board_row.addWidget(self.numbers_group, stretch=1)

        self.categories_group = QGroupBox(CATEGORIES_TITLE, self)
        categories_container = QWidget(self)
        self.categories_layout = QGridLayout()
        categories_container.setLayout(self.categories_layout)
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(categories_container)
        group_layout = QVBoxLayout()
        group_layout.addWidget(scroll)
        self.categories_group.setLayout(group_layout)
        board_row.addWidget(self.categories_group, stretch=2)

        layout.addLayout(board_row, stretch=1)

    def set_categories(self, categories: list[Category]) -> None:
        _clear_layout(self.categories_layout)
        self._category_cards = {}
        for index, category in enumerate(categories):
            card = CategoryCard(category, self.on_place, self.on_remove, self)
            self._category_cards[category.id] = card
            self.categories_layout.addWidget(card, index // _CATEGORY_COLUMNS, index % _CATEGORY_COLUMNS)

    def render(self, snapshot: SessionSnapshot) -> None:
        self.player_label.setText(snapshot.player_name)
        self.time_label.setText(TIME_TEMPLATE.format(time=snapshot.elapsed_display))
        self.classified_label.setText(
            CLASSIFIED_TEMPLATE.format(count=snapshot.classified_count, total=snapshot.question_count)
        )
        self._render_pool(snapshot.pool, snapshot.selected_number)
        for category_id, card in self._category_cards.items():
            card.set_numbers(snapshot.assignments.get(category_id, []))

    def reset_state(self) -> None:
        self._pool_snapshot = None

    def _render_pool(self, pool: list[str], selected: str | None) -> None:
        snapshot = (list(pool), selected)
        if snapshot == self._pool_snapshot:
            return
        self._pool_snapshot = snapshot
        _clear_layout(self.numbers_layout)
        for index, number in enumerate(pool):
            button = QPushButton(number, self.numbers_group)
            button.setAccessibleName(f"Select number {number}")
            button.setStyleSheet(
                Styles.get_number_button_style(number == selected)
                + f"font-size: {self._game_font_size}pt;"
            )
            button.clicked.connect(lambda _checked=False, n=number: self.on_select_number(n))
            self.numbers_layout.addWidget(button, index // _NUMBER_COLUMNS, index % _NUMBER_COLUMNS)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._pool_snapshot = None
        label_style = f"font-size: {font_size}pt;"
        self.time_label.setStyleSheet(label_style)
        self.classified_label.setStyleSheet(label_style)
        self.player_label.setStyleSheet(label_style + "font-weight: bold;")
