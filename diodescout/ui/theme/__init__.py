"""Theme package for DiodeScout UI."""

from .colors import ThemeColors, DARK_THEME, build_palette, apply_theme

__all__ = [
    "ThemeColors",
    "DARK_THEME",
    "build_palette",
    "apply_theme",
]
