"""
OpenAir dialect.

Each line starts with a one or two letter directive:

    AC R                          class, starts a new airspace
    AN ED-R 123                   name
    AL GND / AH FL100             base / top
    AR 123.450                    radio
    V X=53:20:41 N 010:24:41 E    center for circles and arcs
    V D=+ / V D=-                 arc direction
    DP 53:20:41 N 010:24:41 E     boundary point
    DA 2.5,270,90                 sector: radius (NM), start and end bearing
    DB 53:20 N 010:20 E,53:30 N 010:20 E    arc between two points
    DC 2.5                        circle radius (NM), ends the airspace
"""

import logging
from typing import Optional

from ..models.airspace import AirspaceClass
from ..utils.units import Unit, to_sys_unit
from .altitude import read_altitude
from .arc import calculate_arc, calculate_sector
from .coordinates import read_coords, scan_decimal
from .errors import MalformedCoordinateError
from .pending import AirspaceSink, PendingAirspace

logger = logging.getLogger(__name__)

# Tested in order as prefixes of the AC value
AIRSPACE_CLASS_STRINGS = [
    ('R', AirspaceClass.RESTRICT),
    ('Q', AirspaceClass.DANGER),
    ('P', AirspaceClass.PROHIBITED),
    ('CTR', AirspaceClass.CTR),
    ('A', AirspaceClass.CLASSA),
    ('B', AirspaceClass.CLASSB),
    ('C', AirspaceClass.CLASSC),
    ('D', AirspaceClass.CLASSD),
    ('GP', AirspaceClass.NOGLIDER),
    ('W', AirspaceClass.WAVE),
    ('E', AirspaceClass.CLASSE),
    ('F', AirspaceClass.CLASSF),
    ('TMZ', AirspaceClass.TMZ),
    ('G', AirspaceClass.CLASSG),
]


def parse_type(text: str) -> AirspaceClass:
    for prefix, airspace_class in AIRSPACE_CLASS_STRINGS:
        if text.startswith(prefix):
            return airspace_class
    return AirspaceClass.OTHER


def _value_after_space(text: str) -> Optional[str]:
    """
    Return the directive value following a single space.

    An empty value is returned as "" to cope with files that leave a
    directive blank. Anything other than a space after the directive makes
    the line malformed and None is returned.
    """
    if not text:
        return text
    if text[0] != ' ':
        return None
    return text[1:]


def _read_sector(line: str, pending: PendingAirspace) -> None:
    # Radius, start and end bearing, each value separated by one character
    values = []
    pos = 1
    for _ in range(3):
        value, pos = scan_decimal(line, pos + 1)
        if value is None:
            logger.warning(f"Malformed sector, directive skipped: \"{line}\"")
            return
        values.append(value)
    radius, start_bearing, end_bearing = values

    pending.points.extend(calculate_sector(
        pending.center,
        to_sys_unit(radius, Unit.NAUTICAL_MILES),
        start_bearing,
        end_bearing,
        pending.rotation,
    ))


def _read_arc(line: str, pending: PendingAirspace) -> None:
    start = read_coords(line[3:])
    if start is None:
        raise MalformedCoordinateError("Malformed arc start", line)

    comma = line.find(',')
    if comma < 0:
        raise MalformedCoordinateError("Missing arc end", line)

    end = read_coords(line[comma + 1:])
    if end is None:
        raise MalformedCoordinateError("Malformed arc end", line)

    pending.points.extend(calculate_arc(pending.center, start, end, pending.rotation))


def _parse_d_line(line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    directive = line[1:2].upper()

    if directive == 'P':
        value = _value_after_space(line[2:])
        if value is None:
            logger.debug(f"Malformed point, directive skipped: \"{line}\"")
            return
        point = read_coords(value)
        if point is None:
            raise MalformedCoordinateError("Malformed point", line)
        pending.points.append(point)

    elif directive == 'C':
        radius, _ = scan_decimal(line, 2)
        if radius is None:
            logger.warning(f"Malformed circle radius, directive skipped: \"{line}\"")
            return
        pending.radius = to_sys_unit(radius, Unit.NAUTICAL_MILES)
        pending.add_circle(sink)
        pending.reset()

    elif directive == 'A':
        _read_sector(line, pending)

    elif directive == 'B':
        _read_arc(line, pending)


def _parse_v_line(line: str, pending: PendingAirspace) -> None:
    variable = line[2:].upper()

    if variable.startswith('X='):
        center = read_coords(line[4:])
        if center is None:
            raise MalformedCoordinateError("Malformed center", line)
        pending.center = center
    elif variable.startswith('D=-'):
        pending.rotation = -1
    elif variable.startswith('D=+'):
        pending.rotation = 1


def _parse_a_line(line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    directive = line[1:2].upper()
    if directive not in ('C', 'N', 'L', 'H', 'R'):
        return

    value = _value_after_space(line[2:])
    if value is None:
        logger.debug(f"Malformed A{directive} value, directive skipped: \"{line}\"")
        return

    if directive == 'C':
        if not pending.waiting:
            pending.add_polygon(sink)
        pending.reset()
        pending.airspace_class = parse_type(value)
        pending.waiting = False
    elif directive == 'N':
        pending.name = value
    elif directive == 'L':
        pending.base = read_altitude(value)
    elif directive == 'H':
        pending.top = read_altitude(value)
    elif directive == 'R':
        pending.radio = value


def parse_line_openair(line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    """
    Parse one OpenAir line.

    Unknown directives are ignored. Finished airspaces are inserted into
    the sink as soon as a record ends.

    Args:
        line: The line, comments stripped, not empty
        pending: The airspace being accumulated
        sink: Receives finished airspaces

    Raises:
        MalformedCoordinateError: If a DP, DB or V X= coordinate is unreadable
    """
    first = line[0].upper()

    if first == 'D':
        _parse_d_line(line, pending, sink)
    elif first == 'V':
        _parse_v_line(line, pending)
    elif first == 'A':
        _parse_a_line(line, pending, sink)
