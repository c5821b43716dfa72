"""Theme colors for DiodeScout UI."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from PySide6 import QtGui, QtWidgets


@dataclass
class ThemeColors:
    """Color palette for a theme."""
    # Backgrounds
    window: str
    base: str
    alternate_base: str
    button: str
    tooltip_base: str

    # Text
    text: str
    bright_text: str

    # Accents
    highlight: str
    link: str

    # Charts
    chart_background: str
    chart_axis: str
    chart_series: List[str] = field(default_factory=list)


# Dark Fusion theme
DARK_THEME = ThemeColors(
    window="#353535",
    base="#1e1e1e",
    alternate_base="#2d2d2d",
    button="#3c3c3c",
    tooltip_base="#353535",
    text="#ffffff",
    bright_text="#ff0000",
    highlight="#2a82da",
    link="#2a82da",
    chart_background="#1c2b3a",
    chart_axis="#c8d3de",
    chart_series=[
        "#58a6ff", "#d29922", "#3fb950", "#f85149",
        "#a371f7", "#39c5cf", "#ff7b72", "#e3b341",
    ],
)


def build_palette(theme: ThemeColors) -> QtGui.QPalette:
    """Build a QPalette from theme colors."""
    role = QtGui.QPalette.ColorRole
    palette = QtGui.QPalette()
    palette.setColor(role.Window, QtGui.QColor(theme.window))
    palette.setColor(role.WindowText, QtGui.QColor(theme.text))
    palette.setColor(role.Base, QtGui.QColor(theme.base))
    palette.setColor(role.AlternateBase, QtGui.QColor(theme.alternate_base))
    palette.setColor(role.ToolTipBase, QtGui.QColor(theme.tooltip_base))
    palette.setColor(role.ToolTipText, QtGui.QColor(theme.text))
    palette.setColor(role.Text, QtGui.QColor(theme.text))
    palette.setColor(role.BrightText, QtGui.QColor(theme.bright_text))
    palette.setColor(role.HighlightedText, QtGui.QColor(theme.text))
    palette.setColor(role.Button, QtGui.QColor(theme.button))
    palette.setColor(role.ButtonText, QtGui.QColor(theme.text))
    palette.setColor(role.Link, QtGui.QColor(theme.link))
    palette.setColor(role.Highlight, QtGui.QColor(theme.highlight))
    return palette


def apply_theme(app: QtWidgets.QApplication, theme: ThemeColors = DARK_THEME) -> None:
    """Apply the Fusion style with the theme palette to the application."""
    app.setStyle(QtWidgets.QStyleFactory.create("Fusion"))
    app.setPalette(build_palette(theme))
