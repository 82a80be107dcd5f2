"""
Data models for the euro_airspace library.

This package contains the geographic point, altitude and airspace records
produced by the parsers, plus the in-memory AirspaceDatabase they are
inserted into and its queryable collections.
"""

from .geo_point import GeoPoint, GeoVector
from .altitude import AirspaceAltitude, AltitudeReference
from .airspace import (
    Airspace,
    AirspaceActivity,
    AirspaceCircle,
    AirspaceClass,
    AirspacePolygon,
)
from .queryable_collection import QueryableCollection
from .airspace_collection import AirspaceCollection
from .airspace_database import AirspaceDatabase, AirspaceSink

__all__ = [
    # Core models
    'GeoPoint',
    'GeoVector',
    'AirspaceAltitude',
    'AltitudeReference',
    'Airspace',
    'AirspaceActivity',
    'AirspaceCircle',
    'AirspaceClass',
    'AirspacePolygon',
    # Queryable collections
    'QueryableCollection',
    'AirspaceCollection',
    # Sink
    'AirspaceDatabase',
    'AirspaceSink',
]
