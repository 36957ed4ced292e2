"""Color palette for the application chrome, with light and dark themes.

Plot colours are deliberately absent: they live in
``quadratic_app.constants.plot_constants`` so the exported page draws the
same picture regardless of the desktop theme.
"""

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
    TITLE = ThemeColors(light="#4338CA", dark="#A5B4FC")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#EEF2FF", dark="#2D2D2D")

    # Readout cards
    CARD_VERTEX_BG = ThemeColors(light="#EEF2FF", dark="#27304A")
    CARD_ROOTS_BG = ThemeColors(light="#ECFDF5", dark="#1F3A30")
    CARD_EVALUATE_BG = ThemeColors(light="#EFF6FF", dark="#22324A")

    BORDER_PRIMARY = ThemeColors(light="#E5E7EB", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#4F46E5", dark="#6366F1")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F3F4F6", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")

    # Quiz feedback
    FEEDBACK_CORRECT_BG = ThemeColors(light="#F0FDF4", dark="#14532D")
    FEEDBACK_CORRECT_BORDER = ThemeColors(light="#86EFAC", dark="#22C55E")
    FEEDBACK_CORRECT_TEXT = ThemeColors(light="#065F46", dark="#86EFAC")
    FEEDBACK_INCORRECT_BG = ThemeColors(light="#FEF2F2", dark="#7F1D1D")
    FEEDBACK_INCORRECT_BORDER = ThemeColors(light="#FCA5A5", dark="#EF4444")
    FEEDBACK_INCORRECT_TEXT = ThemeColors(light="#7F1D1D", dark="#FCA5A5")
