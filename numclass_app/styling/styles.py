"""Centralized stylesheets for the game widgets."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_PRIMARY_HOVER.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                margin-top: 8px;
                padding-top: 12px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_secondary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};"
            f"color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
        )

    @staticmethod
    def get_submit_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"background-color: {ColorPalette.BUTTON_SUBMIT_BG.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_number_button_style(selected: bool, theme: Theme = Theme.LIGHT) -> str:
        if selected:
            return (
                f"background-color: {ColorPalette.NUMBER_SELECTED_BG.get(theme)};"
                f"color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
                f"border: 2px solid {ColorPalette.NUMBER_SELECTED_BORDER.get(theme)};"
                "font-weight: bold;"
            )
        return (
            f"background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};"
            f"color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
            f"border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            "font-weight: bold;"
        )

    @staticmethod
    def get_category_card_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QGroupBox {{ background-color: {ColorPalette.CATEGORY_DROPZONE_BG.get(theme)};"
            f"border: 2px dashed {ColorPalette.CATEGORY_DROPZONE_BORDER.get(theme)}; }}"
        )

    @staticmethod
    def get_chip_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.CHIP_BG.get(theme)};"
            f"color: {ColorPalette.CHIP_TEXT.get(theme)};"
            "border-radius: 10px; padding: 2px 10px; font-size: 12px;"
        )

    @staticmethod
    def get_result_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if correct else ColorPalette.ERROR
        return f"color: {color.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
