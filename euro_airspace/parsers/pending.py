import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..models.airspace import (
    AirspaceActivity,
    AirspaceCircle,
    AirspaceClass,
    AirspacePolygon,
)
from ..models.airspace_database import AirspaceSink
from ..models.altitude import AirspaceAltitude
from ..models.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass
class PendingAirspace:
    """
    Accumulates the lines of the airspace currently being read.

    `waiting` is True until the first class/type line of a record has been
    seen, so nothing is emitted for the lines before it.

    Name, base and top are kept by reset(): TNP files give the title
    before the TYPE= line that starts the record.
    """

    name: str = ""
    radio: str = ""
    airspace_class: AirspaceClass = AirspaceClass.OTHER
    base: AirspaceAltitude = field(default_factory=AirspaceAltitude)
    top: AirspaceAltitude = field(default_factory=AirspaceAltitude)
    days_of_operation: AirspaceActivity = field(default_factory=AirspaceActivity.all_days)

    points: List[GeoPoint] = field(default_factory=list)

    center: GeoPoint = GeoPoint(0.0, 0.0)
    radius: float = 0.0
    rotation: int = 1

    waiting: bool = True

    def reset(self) -> None:
        self.days_of_operation = AirspaceActivity.all_days()
        self.radio = ""
        self.airspace_class = AirspaceClass.OTHER
        self.points = []
        self.center = GeoPoint(0.0, 0.0)
        self.rotation = 1
        self.radius = 0.0
        self.waiting = True

    @property
    def last_point(self) -> Optional[GeoPoint]:
        return self.points[-1] if self.points else None

    def _properties(self) -> dict:
        return {
            'name': self.name,
            'airspace_class': self.airspace_class,
            'base': self.base,
            'top': self.top,
            'radio': self.radio,
            'days_of_operation': self.days_of_operation,
        }

    def add_polygon(self, sink: AirspaceSink) -> None:
        if not self.points:
            logger.warning(f"Airspace '{self.name}' has no boundary points, not added")
            return
        sink.insert(AirspacePolygon(points=tuple(self.points), **self._properties()))

    def add_circle(self, sink: AirspaceSink) -> None:
        sink.insert(AirspaceCircle(center=self.center, radius=self.radius, **self._properties()))
