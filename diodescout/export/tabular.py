"""Tabular (semicolon separated) export and import of measurement series.

File layout, one block per stored series::

    Series 1
    Voltage (V);Current (mA)
    0,412000;0,013000
    ...
    <blank line>

Numbers use the host locale's decimal separator so the file opens directly
in a spreadsheet; the field separator is always a semicolon.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import QLocale

from ..core import MeasurementSeries, SeriesStore

logger = logging.getLogger(__name__)

SEPARATOR = ';'
SERIES_LABEL = "Series"
COLUMN_HEADER = ["Voltage (V)", "Current (mA)"]
DECIMALS = 6
MINUS_SIGN = "\u2212"


def _number_locale(locale: Optional[QLocale]) -> QLocale:
    """Copy of the given (or system) locale without group separators."""
    loc = QLocale(locale) if locale is not None else QLocale()
    loc.setNumberOptions(QLocale.NumberOption.OmitGroupSeparator)
    return loc


def format_locale_number(value: float, locale: Optional[QLocale] = None) -> str:
    """Fixed-point with 6 decimals using the locale's decimal separator."""
    return _number_locale(locale).toString(value, 'f', DECIMALS)


def export_tabular(store: SeriesStore, filepath: Union[str, Path],
                   locale: Optional[QLocale] = None) -> bool:
    """Export all stored series to a tabular file.

    Args:
        store: Series to export (read only).
        filepath: Destination file, overwritten if it exists.
        locale: Number locale; defaults to the system locale.

    Returns:
        False if the file could not be written.
    """
    loc = _number_locale(locale)

    try:
        with open(filepath, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f, delimiter=SEPARATOR, lineterminator='\n')
            for index, series in enumerate(store.all_series(), start=1):
                writer.writerow([f"{SERIES_LABEL} {index}"])
                writer.writerow(COLUMN_HEADER)
                for p in series:
                    writer.writerow([
                        loc.toString(p.voltage, 'f', DECIMALS),
                        loc.toString(p.current, 'f', DECIMALS),
                    ])
                writer.writerow([])
    except OSError as e:
        logger.warning(f"Tabular export to {filepath} failed: {e}")
        return False

    logger.info(f"Exported {store.series_count()} series to {filepath}")
    return True


class TabularImporter:
    """Read series back from a file written by :func:`export_tabular`."""

    @staticmethod
    def parse_number(text: str) -> float:
        """Parse a number written with either ',' or '.' as decimal separator.

        Locales such as sv_SE write U+2212 instead of a hyphen-minus.

        Raises:
            ValueError: If the text is not a number.
        """
        return float(text.strip().replace(MINUS_SIGN, '-').replace(',', '.'))

    @classmethod
    def import_file(cls, filepath: Path) -> List[MeasurementSeries]:
        """Import all series from a tabular file.

        Rows that cannot be parsed are skipped. Series without any valid
        row are dropped.

        Args:
            filepath: Path to the file

        Returns:
            List of series in file order

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If no series with data is found
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        result: List[MeasurementSeries] = []
        current: Optional[MeasurementSeries] = None

        with open(filepath, 'r', encoding='utf-8', newline='') as f:
            reader = csv.reader(f, delimiter=SEPARATOR)

            for row in reader:
                if not row or not any(cell.strip() for cell in row):
                    current = None  # Blank line closes the block
                    continue

                first = row[0].strip()
                if first.startswith(SERIES_LABEL):
                    current = MeasurementSeries()
                    result.append(current)
                    continue

                if current is None or len(row) < 2:
                    continue

                try:
                    voltage = cls.parse_number(row[0])
                    current_ma = cls.parse_number(row[1])
                except ValueError:
                    continue  # Column header or invalid row
                current.add_point(voltage, current_ma)

        result = [s for s in result if not s.empty()]
        if not result:
            raise ValueError("No measurement series found in file")
        return result
