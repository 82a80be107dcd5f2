import math
from typing import NamedTuple, Tuple
from dataclasses import dataclass


class GeoVector(NamedTuple):
    """Distance (metres) and initial bearing (degrees) between two points."""

    distance: float
    bearing: float


@dataclass(frozen=True)
class GeoPoint:
    """
    A geographic position.

    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    All distance calculations use metres on a spherical earth.
    All bearing calculations use degrees (0-360, where 0/360 is North, 90 is East, etc.)
    """

    EARTH_RADIUS_M = 6371000.0

    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate latitude after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")

    def normalize(self) -> 'GeoPoint':
        """Return the same position with longitude in [-180, 180)."""
        longitude = (self.longitude + 180.0) % 360.0 - 180.0
        return GeoPoint(self.latitude, longitude)

    def point_from_bearing_distance(self, bearing: float, distance: float) -> 'GeoPoint':
        """
        Create a new GeoPoint from this point's position, bearing, and distance.

        Args:
            bearing: Bearing in degrees (0-360, where 0/360 is North, 90 is East, etc.)
            distance: Distance in metres

        Returns:
            A new, normalized GeoPoint at the calculated position
        """
        angular = distance / self.EARTH_RADIUS_M

        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        bearing_rad = math.radians(bearing)

        lat2 = math.asin(
            math.sin(lat1) * math.cos(angular) +
            math.cos(lat1) * math.sin(angular) * math.cos(bearing_rad)
        )

        lon2 = lon1 + math.atan2(
            math.sin(bearing_rad) * math.sin(angular) * math.cos(lat1),
            math.cos(angular) - math.sin(lat1) * math.sin(lat2)
        )

        return GeoPoint(math.degrees(lat2), math.degrees(lon2)).normalize()

    def distance_bearing(self, other: 'GeoPoint') -> GeoVector:
        """
        Calculate the distance and initial bearing to another point using the Haversine formula.

        Args:
            other: The target GeoPoint

        Returns:
            GeoVector of (distance in metres, bearing in degrees [0, 360))
        """
        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        distance = self.EARTH_RADIUS_M * c

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        bearing = math.degrees(math.atan2(y, x))
        bearing = (bearing + 360) % 360

        return GeoVector(distance, bearing)

    def bearing_to(self, other: 'GeoPoint') -> float:
        return self.distance_bearing(other).bearing

    def to_dms(self) -> Tuple[str, str]:
        """
        Convert coordinates to the OpenAir sexagesimal format.

        Returns:
            Tuple of (latitude string, longitude string)
            Example: ("53:20:41 N", "010:24:41 E")
        """
        def decimal_to_dms(decimal_degrees: float, is_longitude: bool) -> str:
            direction = ('E' if decimal_degrees >= 0 else 'W') if is_longitude else ('N' if decimal_degrees >= 0 else 'S')
            total_seconds = int(round(abs(decimal_degrees) * 3600))
            degrees, remainder = divmod(total_seconds, 3600)
            minutes, seconds = divmod(remainder, 60)
            width = 3 if is_longitude else 2
            return f"{degrees:0{width}d}:{minutes:02d}:{seconds:02d} {direction}"

        return (
            decimal_to_dms(self.latitude, False),
            decimal_to_dms(self.longitude, True)
        )

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
