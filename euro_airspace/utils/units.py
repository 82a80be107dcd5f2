"""
Unit conversion service.

All values stored in the airspace models are in system units:
- distances and altitudes in metres
- flight levels in hundreds of feet

Only the conversions needed to interpret airspace files and to display
their content are provided here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class Unit(Enum):
    """Units understood by the conversion service."""

    METERS = "m"
    FEET = "ft"
    FLIGHT_LEVEL = "FL"
    KILOMETERS = "km"
    NAUTICAL_MILES = "NM"
    STATUTE_MILES = "mi"


# Factor to multiply a system unit value with to get the unit value
_FACTORS: Dict[Unit, float] = {
    Unit.METERS: 1.0,
    Unit.FEET: 1 / 0.3048,
    Unit.FLIGHT_LEVEL: 1 / 30.48,
    Unit.KILOMETERS: 0.001,
    Unit.NAUTICAL_MILES: 1 / 1852.0,
    Unit.STATUTE_MILES: 1 / 1609.344,
}


def to_sys_unit(value: float, unit: Unit) -> float:
    """Convert a value expressed in `unit` into system units."""
    return value / _FACTORS[unit]


def to_user_unit(value: float, unit: Unit) -> float:
    """Convert a value in system units into `unit`."""
    return value * _FACTORS[unit]


@dataclass(frozen=True)
class UnitSetting:
    """
    Display units for distances and altitudes.

    The named presets match the unit stores offered to pilots when
    configuring the application.
    """

    distance_unit: Unit = Unit.KILOMETERS
    altitude_unit: Unit = Unit.METERS

    @classmethod
    def preset(cls, name: str) -> 'UnitSetting':
        """
        Get a named unit preset.

        Args:
            name: Preset name, case-insensitive (e.g. 'european', 'British')

        Returns:
            UnitSetting for the preset

        Raises:
            ValueError: If no preset has that name
        """
        setting = _PRESETS.get(name.lower())
        if setting is None:
            raise ValueError(f"Unknown unit preset: {name} (expected one of {', '.join(cls.preset_names())})")
        return setting

    @classmethod
    def preset_names(cls) -> List[str]:
        return list(_PRESETS.keys())


_PRESETS: Dict[str, UnitSetting] = {
    'european': UnitSetting(Unit.KILOMETERS, Unit.METERS),
    'british': UnitSetting(Unit.KILOMETERS, Unit.FEET),
    'american': UnitSetting(Unit.STATUTE_MILES, Unit.FEET),
    'australian': UnitSetting(Unit.NAUTICAL_MILES, Unit.FEET),
}
