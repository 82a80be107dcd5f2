"""
TNP (Tim Newport-Peace) dialect.

Lines are KEYWORD=value pairs, plus the arc and circle lines:

    INCLUDE=NO
    TYPE=CTA/CTR
    TITLE=HAMBURG CTR
    CLASS=D
    TOPS=2500ALT
    BASE=SFC
    RADIO=120.100
    ACTIVE=WEEKDAY
    POINT=N533813 E0095943
    CLOCKWISE RADIUS=34.95 CENTRE=N523333 E0131603 TO=N522052 E0122236
    CIRCLE RADIUS=17.00 CENTRE=N533813 E0095943
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.airspace import AirspaceActivity, AirspaceClass
from ..utils.units import Unit, to_sys_unit
from .altitude import read_altitude
from .arc import calculate_arc
from .coordinates import read_coords_tnp, scan_decimal
from .errors import MalformedCoordinateError, MalformedLineError
from .pending import AirspaceSink, PendingAirspace

logger = logging.getLogger(__name__)

# Prohibited and danger areas are read as restricted
TNP_TYPES = {
    'C': AirspaceClass.CTR,
    'CTA': AirspaceClass.CTR,
    'CTA/CTR': AirspaceClass.CTR,
    'R': AirspaceClass.RESTRICT,
    'RESTRICTED': AirspaceClass.RESTRICT,
    'P': AirspaceClass.RESTRICT,
    'PROHIBITED': AirspaceClass.RESTRICT,
    'D': AirspaceClass.RESTRICT,
    'DANGER': AirspaceClass.RESTRICT,
    'G': AirspaceClass.WAVE,
    'GSEC': AirspaceClass.WAVE,
}

TNP_CLASSES = {
    'A': AirspaceClass.CLASSA,
    'B': AirspaceClass.CLASSB,
    'C': AirspaceClass.CLASSC,
    'D': AirspaceClass.CLASSD,
    'E': AirspaceClass.CLASSE,
    'F': AirspaceClass.CLASSF,
    'G': AirspaceClass.CLASSG,
}

TNP_ACTIVITIES = {
    'WEEKEND': AirspaceActivity.weekend,
    'WEEKDAY': AirspaceActivity.weekdays,
    'EVERYDAY': AirspaceActivity.all_days,
}


@dataclass
class TnpState:
    """File scoped TNP state: records between INCLUDE=NO and INCLUDE=YES are ignored."""
    ignore: bool = False


def after_prefix_ci(text: str, prefix: str) -> Optional[str]:
    """Return what follows prefix in text (case-insensitive), or None if text does not start with it."""
    if text[:len(prefix)].upper() == prefix.upper():
        return text[len(prefix):]
    return None


def parse_type_tnp(text: str) -> AirspaceClass:
    return TNP_TYPES.get(text.upper(), AirspaceClass.OTHER)


def parse_class_tnp(text: str) -> AirspaceClass:
    return TNP_CLASSES.get(text[:1], AirspaceClass.OTHER)


def _parse_circle(text: str, line: str, pending: PendingAirspace) -> None:
    # RADIUS=17.00 CENTRE=N533813 E0095943
    parameter = after_prefix_ci(text, 'RADIUS=')
    if parameter is None:
        raise MalformedLineError("Missing circle RADIUS=", line)
    radius, _ = scan_decimal(parameter, 0)
    if radius is None:
        raise MalformedLineError("Malformed circle radius", line)

    space = parameter.find(' ')
    if space < 0:
        raise MalformedLineError("Missing circle CENTRE=", line)
    parameter = after_prefix_ci(parameter[space:], ' CENTRE=')
    if parameter is None:
        raise MalformedLineError("Missing circle CENTRE=", line)

    center = read_coords_tnp(parameter)
    if center is None:
        raise MalformedCoordinateError("Malformed circle center", line)

    pending.radius = to_sys_unit(radius, Unit.NAUTICAL_MILES)
    pending.center = center


def _parse_arc(text: str, line: str, pending: PendingAirspace) -> None:
    # RADIUS=34.95 CENTRE=N523333 E0131603 TO=N522052 E0122236
    start = pending.last_point
    if start is None:
        raise MalformedLineError("Arc without a previous point", line)

    space = text.find(' ')
    if space < 0:
        raise MalformedLineError("Missing arc CENTRE=", line)
    parameter = after_prefix_ci(text[space:], ' CENTRE=')
    if parameter is None:
        raise MalformedLineError("Missing arc CENTRE=", line)

    center = read_coords_tnp(parameter)
    if center is None:
        raise MalformedCoordinateError("Malformed arc center", line)

    # Skip the space between latitude and longitude of the center
    space = parameter.find(' ')
    if space < 0:
        raise MalformedLineError("Missing arc TO=", line)
    parameter = parameter[space + 1:]
    space = parameter.find(' ')
    if space < 0:
        raise MalformedLineError("Missing arc TO=", line)
    parameter = after_prefix_ci(parameter[space:], ' TO=')
    if parameter is None:
        raise MalformedLineError("Missing arc TO=", line)

    end = read_coords_tnp(parameter)
    if end is None:
        raise MalformedCoordinateError("Malformed arc end", line)

    pending.center = center
    pending.points.extend(calculate_arc(center, start, end, pending.rotation))


def _point(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    point = read_coords_tnp(parameter)
    if point is None:
        raise MalformedCoordinateError("Malformed point", line)
    pending.points.append(point)


def _circle(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    _parse_circle(parameter, line, pending)
    pending.add_circle(sink)
    pending.reset()


def _clockwise(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.rotation = 1
    _parse_arc(parameter, line, pending)


def _anti_clockwise(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.rotation = -1
    _parse_arc(parameter, line, pending)


def _title(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.name = parameter


def _type(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    if not pending.waiting:
        pending.add_polygon(sink)
    pending.reset()
    pending.airspace_class = parse_type_tnp(parameter)
    pending.waiting = False


def _class(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    # Only a fallback, TYPE= wins
    if pending.airspace_class == AirspaceClass.OTHER:
        pending.airspace_class = parse_class_tnp(parameter)


def _tops(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.top = read_altitude(parameter)


def _base(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.base = read_altitude(parameter)


def _radio(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    pending.radio = parameter


def _active(parameter: str, line: str, pending: PendingAirspace, sink: AirspaceSink) -> None:
    activity = TNP_ACTIVITIES.get(parameter.upper())
    if activity is not None:
        pending.days_of_operation = activity()


_LINE_HANDLERS = [
    ('POINT=', _point),
    ('CIRCLE ', _circle),
    ('CLOCKWISE ', _clockwise),
    ('ANTI-CLOCKWISE ', _anti_clockwise),
    ('TITLE=', _title),
    ('TYPE=', _type),
    ('CLASS=', _class),
    ('TOPS=', _tops),
    ('BASE=', _base),
    ('RADIO=', _radio),
    ('ACTIVE=', _active),
]


def parse_line_tnp(line: str, pending: PendingAirspace, sink: AirspaceSink, state: TnpState) -> None:
    """
    Parse one TNP line.

    Args:
        line: The line, comments stripped, not empty
        pending: The airspace being accumulated
        sink: Receives finished airspaces
        state: File scoped include/ignore state

    Raises:
        MalformedCoordinateError: If a POINT=, CIRCLE or arc coordinate is unreadable
        MalformedLineError: If a CIRCLE or arc line is incomplete
    """
    parameter = after_prefix_ci(line, 'INCLUDE=')
    if parameter is not None:
        if parameter.upper() == 'YES':
            state.ignore = False
        elif parameter.upper() == 'NO':
            state.ignore = True
        return

    if state.ignore:
        return

    for keyword, handler in _LINE_HANDLERS:
        parameter = after_prefix_ci(line, keyword)
        if parameter is not None:
            handler(parameter, line, pending, sink)
            return

    logger.debug(f"Ignored TNP line: \"{line}\"")
