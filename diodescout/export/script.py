"""Export of measurement series as a standalone matplotlib script."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core import SeriesStore

logger = logging.getLogger(__name__)

HEADER = (
    "#!/usr/bin/env python3\n"
    "import matplotlib.pyplot as plt\n"
    "\n"
    "series = []\n"
    "\n"
)

FOOTER = (
    "for i, (v, c) in enumerate(series):\n"
    "    plt.plot(v, c, label=f'Series {i+1}')\n"
    "\n"
    "plt.xlabel('Volt (V)')\n"
    "plt.ylabel('Milliampere (mA)')\n"
    "plt.legend()\n"
    "plt.grid(True)\n"
    "plt.show()\n"
)


def format_literal(value: float) -> str:
    """Fixed-point with 6 decimals and '.' as separator, whatever the locale."""
    return f"{value:.6f}"


def _list_literal(values: Iterable[float]) -> str:
    return "[" + ", ".join(format_literal(v) for v in values) + "]"


def render_script(store: SeriesStore) -> str:
    """Build the script source for all stored series."""
    parts: List[str] = [HEADER]

    for idx, series in enumerate(store.all_series(), start=1):
        parts.append(f"# Series {idx}\n")
        parts.append(f"voltage_{idx} = {_list_literal(p.voltage for p in series)}\n")
        parts.append(f"current_{idx} = {_list_literal(p.current for p in series)}\n")
        parts.append(f"series.append((voltage_{idx}, current_{idx}))\n\n")

    parts.append(FOOTER)
    return "".join(parts)


def export_script(store: SeriesStore, filepath: Union[str, Path]) -> bool:
    """Write all stored series to a Python plotting script.

    Returns:
        False if the file could not be written.
    """
    source = render_script(store)
    try:
        with open(filepath, 'w', encoding='utf-8', newline='\n') as f:
            f.write(source)
    except OSError as e:
        logger.warning(f"Script export to {filepath} failed: {e}")
        return False

    logger.info(f"Exported {store.series_count()} series to {filepath}")
    return True
