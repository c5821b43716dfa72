"""DiodeScout UI application package."""

from .version import __version__, __version_info__, APP_NAME
from .core import MeasurementPoint, MeasurementSeries, SeriesStore, AppSettings
from .serial import LineParser, ParseResult, SerialReader, SerialConfig
from .export import TabularImporter, export_tabular, export_script

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "MeasurementPoint",
    "MeasurementSeries",
    "SeriesStore",
    "AppSettings",
    "LineParser",
    "ParseResult",
    "SerialReader",
    "SerialConfig",
    "TabularImporter",
    "export_tabular",
    "export_script",
]
