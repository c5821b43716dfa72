"""DiodeScout UI version information."""

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

APP_NAME = "DiodeScoutUI"
DESCRIPTION = "Diode I-V curve acquisition and export"
LICENSE = "Apache-2.0"
