"""Application settings with persistence."""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from typing import Optional

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "DiodeScout"
APPLICATION = "DiodeScoutUI"


@dataclass
class AppSettings:
    """Application settings."""
    # Serial
    baud_rate: int = 9600
    device_marker: str = "DIODESCOUT"  # Matched against port description/manufacturer

    # Chart
    show_grid: bool = True
    axis_step: float = 0.5  # Tick interval; axis ranges are rounded up to it

    # Export
    export_dir: str = ""  # Last directory used in a save dialog ("" = home)

    def save(self, settings: Optional[QSettings] = None) -> None:
        """Save settings to persistent storage.

        Uses QSettings, which picks the native location per platform
        (~/.config/DiodeScout/DiodeScoutUI.conf on Linux).
        """
        try:
            settings = settings or QSettings(ORGANIZATION, APPLICATION)
            for f in fields(self):
                settings.setValue(f.name, getattr(self, f.name))
            settings.sync()
        except Exception as e:
            # Settings fall back to defaults next time
            logger.warning(f"Could not save settings: {e}")

    @classmethod
    def load(cls, settings: Optional[QSettings] = None) -> 'AppSettings':
        """Load settings from persistent storage.

        Returns default settings if nothing is stored or it can't be read.
        """
        instance = cls()

        try:
            settings = settings or QSettings(ORGANIZATION, APPLICATION)

            for f in fields(instance):
                if not settings.contains(f.name):
                    continue
                stored = settings.value(f.name)
                default_val = getattr(instance, f.name)

                # Type conversion based on default value type
                if isinstance(default_val, bool):
                    # QSettings stores bools as strings on some platforms
                    if isinstance(stored, bool):
                        value = stored
                    elif isinstance(stored, str):
                        value = stored.lower() in ('true', '1', 'yes')
                    else:
                        value = bool(stored)
                elif isinstance(default_val, int):
                    value = int(stored)
                elif isinstance(default_val, float):
                    value = float(stored)
                else:
                    value = str(stored)
                setattr(instance, f.name, value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring stored settings: {e}")
            return cls()

        if instance.axis_step <= 0:
            instance.axis_step = cls.axis_step
        return instance
