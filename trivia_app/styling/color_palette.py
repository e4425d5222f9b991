"""Color palette for TriviaQt supporting light and dark themes."""

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
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_MUTED = ThemeColors(light="#6B7280", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_HOVER = ThemeColors(light="#F3F4F6", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    # Active "Round n" button
    ACCENT = ThemeColors(light="#1F9AA5", dark="#16808A")
    ACCENT_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")

    # Active "Review n" button
    REVIEW = ThemeColors(light="#F97316", dark="#EA580C")
    REVIEW_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
