from .airspace_parser import (
    AirspaceFileType,
    AirspaceParser,
    FailureReason,
    ParseResult,
    detect_file_type,
)
from .altitude import read_altitude
from .arc import calculate_arc, calculate_sector
from .coordinates import read_coords, read_coords_tnp
from .errors import (
    AirspaceLineError,
    AirspaceParseError,
    MalformedCoordinateError,
    MalformedLineError,
    ParseAbortedError,
    UnknownFileTypeError,
)
from .openair import parse_line_openair
from .pending import PendingAirspace
from .tnp import TnpState, parse_line_tnp

__all__ = [
    'AirspaceFileType',
    'AirspaceParser',
    'FailureReason',
    'ParseResult',
    'detect_file_type',
    'read_altitude',
    'calculate_arc',
    'calculate_sector',
    'read_coords',
    'read_coords_tnp',
    'AirspaceLineError',
    'AirspaceParseError',
    'MalformedCoordinateError',
    'MalformedLineError',
    'ParseAbortedError',
    'UnknownFileTypeError',
    'parse_line_openair',
    'PendingAirspace',
    'TnpState',
    'parse_line_tnp',
]
