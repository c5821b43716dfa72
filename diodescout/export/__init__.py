"""Export functionality for DiodeScout UI."""

from .tabular import TabularImporter, export_tabular, format_locale_number
from .script import export_script, render_script

__all__ = [
    "TabularImporter",
    "export_tabular",
    "format_locale_number",
    "export_script",
    "render_script",
]
