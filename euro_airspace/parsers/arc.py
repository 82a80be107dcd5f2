"""
Arc and sector tessellation.

Curved airspace boundaries are approximated by points every 5 degrees
around the center. Stepping stops once the end bearing is within 7.5
degrees; the exact end point is always added last.
"""

from typing import List

from ..models.geo_point import GeoPoint

ARC_STEP_DEGREES = 5.0
ARC_TOLERANCE_DEGREES = 7.5


def as_bearing(degrees: float) -> float:
    """Normalize an angle into [0, 360)."""
    return degrees % 360.0


def bearing_difference(a: float, b: float) -> float:
    """Absolute angular difference between two bearings, in [0, 180]."""
    delta = abs(as_bearing(a) - as_bearing(b))
    return 360.0 - delta if delta > 180.0 else delta


def calculate_sector(center: GeoPoint, radius: float, start_bearing: float,
                     end_bearing: float, rotation: int) -> List[GeoPoint]:
    """
    Tessellate a sector given by bearings.

    Args:
        center: Center of the arc
        radius: Radius in metres
        start_bearing: Bearing of the first point, degrees
        end_bearing: Bearing of the last point, degrees
        rotation: +1 for clockwise, -1 for counter-clockwise

    Returns:
        Points from the start bearing to the end bearing, in order
    """
    step = rotation * ARC_STEP_DEGREES
    bearing = as_bearing(start_bearing)
    end_bearing = as_bearing(end_bearing)

    points = []
    # A start this close to the end would duplicate it
    if bearing_difference(end_bearing, bearing) > ARC_TOLERANCE_DEGREES:
        points.append(center.point_from_bearing_distance(bearing, radius))
    while bearing_difference(end_bearing, bearing) > ARC_TOLERANCE_DEGREES:
        bearing = as_bearing(bearing + step)
        points.append(center.point_from_bearing_distance(bearing, radius))

    points.append(center.point_from_bearing_distance(end_bearing, radius))
    return points


def calculate_arc(center: GeoPoint, start: GeoPoint, end: GeoPoint, rotation: int) -> List[GeoPoint]:
    """
    Tessellate an arc between two boundary points.

    The radius and start bearing are taken from the start point. The start
    and end points are emitted verbatim so that the arc joins the
    neighbouring boundary points exactly.

    Args:
        center: Center of the arc
        start: First point of the arc
        end: Last point of the arc
        rotation: +1 for clockwise, -1 for counter-clockwise

    Returns:
        Points from start to end, in order
    """
    step = rotation * ARC_STEP_DEGREES
    radius, bearing = center.distance_bearing(start)
    end_bearing = center.bearing_to(end)

    points = [start]
    while bearing_difference(end_bearing, bearing) > ARC_TOLERANCE_DEGREES:
        bearing = as_bearing(bearing + step)
        points.append(center.point_from_bearing_distance(bearing, radius))

    points.append(end)
    return points
