"""Color palette for the quiz game supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Light and dark variants of one color role."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Color roles used by the quiz game stylesheets."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#5C5C5C", dark="#AAAAAA")
    TEXT_DISABLED = ThemeColors(light="#BDBDBD", dark="#555555")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F6FA", dark="#2D2D2D")

    # Difficulty accents
    EASY = ThemeColors(light="#2E7D32", dark="#6FCF6F")
    MEDIUM = ThemeColors(light="#EF8F00", dark="#FFC83D")
    HARD = ThemeColors(light="#C62828", dark="#FF6B6B")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")
    BORDER_FOCUS = ThemeColors(light="#0078D4", dark="#4A9EFF")

    BUTTON_PRIMARY_BG = ThemeColors(light="#0078D4", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E3ECF7", dark="#505050")

    @classmethod
    def for_difficulty(cls, name: str) -> ThemeColors:
        """Accent for a difficulty name; unknown names get the primary button color."""
        return {
            "Easy": cls.EASY,
            "Medium": cls.MEDIUM,
            "Hard": cls.HARD,
        }.get(name, cls.BUTTON_PRIMARY_BG)
