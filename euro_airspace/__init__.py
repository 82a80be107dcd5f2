"""
Airspace definition parsing library.

This package reads the textual airspace formats used by gliding and
general aviation software (OpenAir and TNP) into an in-memory database of
polygon and circle airspaces.

The main public API includes:
- AirspaceParser: Detects the file dialect and parses it into a sink
- AirspaceDatabase: In-memory sink with queries and JSON/CSV export
- AirspacePolygon, AirspaceCircle: Parsed airspace records
- GeoPoint: Geographic position with bearing/distance calculations
- LoggingOperation: Progress and warning reporting through logging
"""

from .models import (
    AirspaceCircle,
    AirspaceClass,
    AirspaceDatabase,
    AirspacePolygon,
    GeoPoint,
)
from .parsers import AirspaceParser, ParseResult
from .utils import LoggingOperation

__version__ = '0.1.0'
__all__ = [
    'AirspaceParser',
    'ParseResult',
    'AirspaceDatabase',
    'AirspacePolygon',
    'AirspaceCircle',
    'AirspaceClass',
    'GeoPoint',
    'LoggingOperation',
]
