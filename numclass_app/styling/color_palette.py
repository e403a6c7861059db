"""Color palette for the number classification game, light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#4B5563", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#F3F4F6", dark="#1E1E1E")
    BACKGROUND_CARD = ThemeColors(light="#FFFFFF", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    # Buttons
    BUTTON_PRIMARY_BG = ThemeColors(light="#2563EB", dark="#4A9EFF")
    BUTTON_PRIMARY_HOVER = ThemeColors(light="#1D4ED8", dark="#3B82F6")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#E5E7EB", dark="#3A3A3A")
    BUTTON_SUBMIT_BG = ThemeColors(light="#16A34A", dark="#22C55E")

    # Game board
    NUMBER_SELECTED_BORDER = ThemeColors(light="#3B82F6", dark="#60A5FA")
    NUMBER_SELECTED_BG = ThemeColors(light="#EFF6FF", dark="#1E3A5F")
    CATEGORY_DROPZONE_BG = ThemeColors(light="#F9FAFB", dark="#262626")
    CATEGORY_DROPZONE_BORDER = ThemeColors(light="#D1D5DB", dark="#555555")
    CHIP_BG = ThemeColors(light="#DBEAFE", dark="#1E3A8A")
    CHIP_TEXT = ThemeColors(light="#1E40AF", dark="#DBEAFE")

    # Results
    SUCCESS = ThemeColors(light="#16A34A", dark="#6FCF6F")
    ERROR = ThemeColors(light="#DC2626", dark="#FF6B6B")
