"""Top-level package for maven-coordinates.

Exports the coordinates value type, its errors and the logging setup.
"""

from .coordinates import DEFAULT_PACKAGING, CoordinateSet, split_version
from .exceptions import CoordinatesError, InvalidCoordinatesError
from .logging_config import configure_logging  # re-export for convenience

__all__ = [
    "CoordinateSet",
    "CoordinatesError",
    "DEFAULT_PACKAGING",
    "InvalidCoordinatesError",
    "configure_logging",
    "split_version",
]
