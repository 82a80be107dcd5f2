"""
Coordinate parsing for airspace files.

Two formats are understood:
- OpenAir sexagesimal: "53:20:41 N 010:24:41 E", also "53:20.68 N 010:24.68 E"
- TNP compact digit runs: "N542500 E0105000"
"""

import logging
import re
from typing import Optional, Tuple

from ..models.geo_point import GeoPoint

logger = logging.getLogger(__name__)

# Leading whitespace is skipped like strtod/strtol do
_DECIMAL = re.compile(r'\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))', re.ASCII)
_INTEGER = re.compile(r'\s*([+-]?\d+)', re.ASCII)


def scan_decimal(text: str, pos: int) -> Tuple[Optional[float], int]:
    """Read a decimal number at pos like strtod, returning (value or None, new position)."""
    match = _DECIMAL.match(text, pos)
    if match is None:
        return None, pos
    return float(match.group(1)), match.end()


def _read_sexagesimal(text: str, pos: int) -> Tuple[Optional[float], int]:
    """Read D[:M[:S]] starting at pos, returning decimal degrees and the new position."""
    degrees, pos = scan_decimal(text, pos)
    if degrees is None or pos >= len(text):
        return None, pos

    if text[pos] == ':':
        minutes, pos = scan_decimal(text, pos + 1)
        if minutes is None or pos >= len(text):
            return None, pos
        degrees += minutes / 60

        if text[pos] == ':':
            seconds, pos = scan_decimal(text, pos + 1)
            if seconds is None or pos >= len(text):
                return None, pos
            degrees += seconds / 3600

    return degrees, pos


def read_coords(text: str) -> Optional[GeoPoint]:
    """
    Parse an OpenAir coordinate pair.

    Args:
        text: Text such as "53:20:41 N 010:24:41 E"

    Returns:
        The normalized GeoPoint, or None if the text is malformed
    """
    latitude, pos = _read_sexagesimal(text, 0)
    if latitude is None:
        return None

    if text[pos] == ' ':
        pos += 1
    if pos >= len(text):
        return None
    if text[pos] in 'Ss':
        latitude = -latitude
    pos += 1
    if pos >= len(text):
        return None

    longitude, pos = _read_sexagesimal(text, pos)
    if longitude is None:
        return None

    if text[pos] == ' ':
        pos += 1
    if pos >= len(text):
        return None
    if text[pos] in 'Ww':
        longitude = -longitude

    try:
        return GeoPoint(latitude, longitude).normalize()
    except ValueError as e:
        logger.debug(f"Rejected coordinate '{text}': {e}")
        return None


def _dms_from_digits(value: int) -> float:
    value = abs(value)
    degrees = value // 10000
    minutes = (value % 10000) // 100
    seconds = value % 100
    return degrees + minutes / 60 + seconds / 3600


def read_coords_tnp(text: str) -> Optional[GeoPoint]:
    """
    Parse a TNP coordinate pair.

    The last four digits of each group are minutes and seconds, the
    remaining leading digits are degrees.

    Args:
        text: Text such as "N542500 E0105000"

    Returns:
        The normalized GeoPoint, or None if a digit group is missing
    """
    if not text:
        return None

    negative = text[0] in 'Ss'
    match = _INTEGER.match(text, 1)
    if match is None:
        return None
    latitude = _dms_from_digits(int(match.group(1)))
    if negative:
        latitude = -latitude

    pos = match.end()
    if pos < len(text) and text[pos] == ' ':
        pos += 1
    if pos >= len(text):
        return None

    negative = text[pos] in 'Ww'
    match = _INTEGER.match(text, pos + 1)
    if match is None:
        return None
    longitude = _dms_from_digits(int(match.group(1)))
    if negative:
        longitude = -longitude

    try:
        return GeoPoint(latitude, longitude).normalize()
    except ValueError as e:
        logger.debug(f"Rejected TNP coordinate '{text}': {e}")
        return None
