from dataclasses import dataclass
from enum import Enum

from ..utils.units import Unit, to_user_unit


class AltitudeReference(Enum):
    """Reference datum of an airspace altitude."""
    UNDEFINED = "undefined"
    MSL = "MSL"
    FL = "FL"
    AGL = "AGL"


def _format_number(value: float) -> str:
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    return text if text != '-0' else '0'


@dataclass(frozen=True)
class AirspaceAltitude:
    """
    Base or top of an airspace.

    The reference decides which value is authoritative:
    - MSL: `altitude` in metres
    - FL: `flight_level` in hundreds of feet
    - AGL: `altitude_above_terrain` in metres; a negative value means the
      terrain surface itself (SFC/GND)
    """

    altitude: float = 0.0
    flight_level: float = 0.0
    altitude_above_terrain: float = 0.0
    reference: AltitudeReference = AltitudeReference.UNDEFINED

    @property
    def is_terrain(self) -> bool:
        """True for an altitude at the surface (SFC/GND)."""
        return self.reference == AltitudeReference.AGL and self.altitude_above_terrain < 0

    def to_text(self, unit: Unit = Unit.FEET) -> str:
        """
        Format the altitude as OpenAir text.

        Args:
            unit: Unit for MSL and AGL values, Unit.FEET or Unit.METERS

        Returns:
            Text such as 'FL95', '1500ft MSL', '300m AGL' or 'SFC'
        """
        if unit not in (Unit.FEET, Unit.METERS):
            raise ValueError(f"Altitudes can only be written in feet or metres, got {unit}")
        suffix = 'ft' if unit == Unit.FEET else 'm'
        if self.reference == AltitudeReference.FL:
            return f"FL{_format_number(self.flight_level)}"
        if self.reference == AltitudeReference.AGL:
            if self.is_terrain:
                return "SFC"
            return f"{_format_number(to_user_unit(self.altitude_above_terrain, unit))}{suffix} AGL"
        return f"{_format_number(to_user_unit(self.altitude, unit))}{suffix} MSL"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'reference': self.reference.value,
            'altitude_m': self.altitude,
            'flight_level': self.flight_level,
            'altitude_above_terrain_m': self.altitude_above_terrain,
            'text': self.to_text(),
        }

    def __str__(self) -> str:
        return self.to_text()
