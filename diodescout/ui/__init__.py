"""UI package for DiodeScout UI."""

from .main_window import MainWindow
from .theme import ThemeColors, DARK_THEME, apply_theme

__all__ = [
    "MainWindow",
    "ThemeColors",
    "DARK_THEME",
    "apply_theme",
]
