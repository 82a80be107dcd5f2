from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import FrozenSet, Tuple

from .altitude import AirspaceAltitude
from .geo_point import GeoPoint


class AirspaceClass(Enum):
    """Airspace classification."""
    OTHER = "other"
    RESTRICT = "restricted"
    PROHIBITED = "prohibited"
    DANGER = "danger"
    CLASSA = "A"
    CLASSB = "B"
    CLASSC = "C"
    CLASSD = "D"
    NOGLIDER = "no_glider"
    CTR = "CTR"
    WAVE = "wave"
    CLASSE = "E"
    CLASSF = "F"
    TMZ = "TMZ"
    CLASSG = "G"


WEEKDAYS = frozenset(range(0, 5))
WEEKEND = frozenset((5, 6))
ALL_DAYS = WEEKDAYS | WEEKEND


@dataclass(frozen=True)
class AirspaceActivity:
    """
    Days of the week on which an airspace is active.

    Days follow `datetime.date.weekday()`: Monday is 0 and Sunday is 6.
    """

    days: FrozenSet[int] = ALL_DAYS

    @classmethod
    def all_days(cls) -> 'AirspaceActivity':
        return cls(ALL_DAYS)

    @classmethod
    def weekdays(cls) -> 'AirspaceActivity':
        return cls(WEEKDAYS)

    @classmethod
    def weekend(cls) -> 'AirspaceActivity':
        return cls(WEEKEND)

    def is_active(self, day: date) -> bool:
        return day.weekday() in self.days

    def __str__(self) -> str:
        if self.days == ALL_DAYS:
            return "everyday"
        if self.days == WEEKDAYS:
            return "weekday"
        if self.days == WEEKEND:
            return "weekend"
        return ",".join(str(d) for d in sorted(self.days))


@dataclass(frozen=True)
class Airspace(ABC):
    """
    A finished airspace record.

    Instances are created by the parsers once a record is complete and are
    never modified afterwards. Use AirspacePolygon or AirspaceCircle.
    """

    name: str = ""
    airspace_class: AirspaceClass = AirspaceClass.OTHER
    base: AirspaceAltitude = field(default_factory=AirspaceAltitude)
    top: AirspaceAltitude = field(default_factory=AirspaceAltitude)
    radio: str = ""
    days_of_operation: AirspaceActivity = field(default_factory=AirspaceActivity)

    @property
    @abstractmethod
    def shape(self) -> str:
        """'polygon' or 'circle'."""

    @abstractmethod
    def _geometry_dict(self) -> dict:
        """Shape specific fields for to_dict()."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            'name': self.name,
            'class': self.airspace_class.value,
            'shape': self.shape,
            'radio': self.radio,
            'base': self.base.to_dict(),
            'top': self.top.to_dict(),
            'active': str(self.days_of_operation),
        }
        result.update(self._geometry_dict())
        return result


@dataclass(frozen=True)
class AirspacePolygon(Airspace):
    """Airspace bounded by a closed polygon."""

    points: Tuple[GeoPoint, ...] = ()

    @property
    def shape(self) -> str:
        return "polygon"

    def _geometry_dict(self) -> dict:
        return {'points': [[p.latitude, p.longitude] for p in self.points]}

    def __repr__(self) -> str:
        return f"AirspacePolygon(name='{self.name}', class={self.airspace_class.name}, points={len(self.points)})"


@dataclass(frozen=True)
class AirspaceCircle(Airspace):
    """Airspace bounded by a circle."""

    center: GeoPoint = GeoPoint(0.0, 0.0)
    radius: float = 0.0  # metres

    @property
    def shape(self) -> str:
        return "circle"

    def _geometry_dict(self) -> dict:
        return {
            'center': [self.center.latitude, self.center.longitude],
            'radius_m': self.radius,
        }

    def __repr__(self) -> str:
        return f"AirspaceCircle(name='{self.name}', class={self.airspace_class.name}, radius={self.radius:.0f}m)"
