"""
Altitude parsing shared by the OpenAir (AL/AH) and TNP (BASE=/TOPS=) dialects.

The text is scanned token by token. The order in which tokens are tested
matters and is relied upon by existing files: "MSL" has to be recognised
before the bare metre suffix "M", and "FL" before the feet suffix "F".
"""

import logging
import re

from ..models.altitude import AirspaceAltitude, AltitudeReference
from ..utils.units import Unit, to_sys_unit, to_user_unit

logger = logging.getLogger(__name__)

# Altitude used for "UNL" (unlimited)
UNLIMITED_ALTITUDE = 50000

# Marks the terrain surface in altitude_above_terrain
TERRAIN_SENTINEL = -1.0

_NUMBER = re.compile(r'\d+(?:\.\d*)?(?:[eE][+-]?\d+)?', re.ASCII)


def _starts_with(text: str, pos: int, token: str) -> bool:
    return text[pos:pos + len(token)].upper() == token


def read_altitude(text: str) -> AirspaceAltitude:
    """
    Parse a free-form altitude expression.

    Args:
        text: Text such as "FL100", "2500ft MSL", "1000 AGL", "SFC" or "UNL"

    Returns:
        The parsed AirspaceAltitude; an unknown datum defaults to MSL and
        numbers without a unit are taken as feet
    """
    altitude = 0.0
    flight_level = 0.0
    above_terrain = 0.0
    reference = AltitudeReference.UNDEFINED
    has_unit = False

    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]

        if char == ' ':
            pos += 1
            continue

        if '0' <= char <= '9':
            match = _NUMBER.match(text, pos)
            value = float(match.group(0))

            if reference == AltitudeReference.FL:
                flight_level = value
            elif reference == AltitudeReference.AGL:
                above_terrain = value
            else:
                altitude = value

            pos = match.end()
        elif _starts_with(text, pos, 'GND'):
            # "XXXGND" is equivalent to "XXXAGL"
            reference = AltitudeReference.AGL
            if altitude > 0:
                above_terrain = altitude
                altitude = 0.0
            else:
                flight_level = 0.0
                altitude = 0.0
                above_terrain = TERRAIN_SENTINEL
                has_unit = True
            pos += 3
        elif _starts_with(text, pos, 'SFC'):
            reference = AltitudeReference.AGL
            flight_level = 0.0
            altitude = 0.0
            above_terrain = TERRAIN_SENTINEL
            has_unit = True
            pos += 3
        elif _starts_with(text, pos, 'FL'):
            # "FL=150" and "FL150"
            reference = AltitudeReference.FL
            has_unit = True
            pos += 2
        elif char in 'Ff':
            altitude = to_sys_unit(altitude, Unit.FEET)
            has_unit = True
            pos += 1
            if pos < length and text[pos] in 'Tt':
                pos += 1
        elif _starts_with(text, pos, 'MSL'):
            reference = AltitudeReference.MSL
            pos += 3
        elif char in 'Mm':
            has_unit = True
            pos += 1
        elif _starts_with(text, pos, 'AGL'):
            reference = AltitudeReference.AGL
            above_terrain = altitude
            altitude = 0.0
            pos += 3
        elif _starts_with(text, pos, 'STD'):
            if reference != AltitudeReference.UNDEFINED:
                logger.debug(f"Multiple altitude references in '{text}'")
            reference = AltitudeReference.FL
            flight_level = to_user_unit(altitude, Unit.FLIGHT_LEVEL)
            pos += 3
        elif _starts_with(text, pos, 'UNL'):
            reference = AltitudeReference.MSL
            above_terrain = TERRAIN_SENTINEL
            altitude = float(UNLIMITED_ALTITUDE)
            pos += 3
        else:
            pos += 1

    if not has_unit and reference != AltitudeReference.FL:
        # Numbers without a unit are feet
        altitude = to_sys_unit(altitude, Unit.FEET)
        above_terrain = to_sys_unit(above_terrain, Unit.FEET)

    if reference == AltitudeReference.UNDEFINED:
        logger.debug(f"No altitude reference in '{text}', using MSL")
        reference = AltitudeReference.MSL

    return AirspaceAltitude(altitude, flight_level, above_terrain, reference)
