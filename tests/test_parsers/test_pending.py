"""
Tests for the pending airspace accumulator.
"""

import pytest

from euro_airspace.models.airspace import AirspaceActivity, AirspaceClass
from euro_airspace.models.geo_point import GeoPoint
from euro_airspace.parsers.altitude import read_altitude
from euro_airspace.parsers.pending import PendingAirspace


def test_reset_keeps_name_and_altitudes():
    pending = PendingAirspace(
        name="KEPT",
        radio="123.450",
        airspace_class=AirspaceClass.DANGER,
        base=read_altitude("SFC"),
        top=read_altitude("FL100"),
        days_of_operation=AirspaceActivity.weekend(),
        points=[GeoPoint(50.0, 10.0)],
        center=GeoPoint(51.0, 11.0),
        radius=1000.0,
        rotation=-1,
        waiting=False,
    )

    pending.reset()

    assert pending.name == "KEPT"
    assert pending.base.is_terrain
    assert pending.top.flight_level == 100
    assert pending.radio == ""
    assert pending.airspace_class == AirspaceClass.OTHER
    assert pending.days_of_operation == AirspaceActivity.all_days()
    assert pending.points == []
    assert pending.center == GeoPoint(0.0, 0.0)
    assert pending.radius == 0.0
    assert pending.rotation == 1
    assert pending.waiting


def test_polygon_without_points_is_not_emitted(database):
    pending = PendingAirspace(name="EMPTY", waiting=False)

    pending.add_polygon(database)

    assert len(database) == 0


def test_emitted_airspace_is_independent_of_pending(database):
    pending = PendingAirspace(name="FIRST", base=read_altitude("1000ft MSL"), waiting=False)
    pending.points.append(GeoPoint(50.0, 10.0))

    pending.add_polygon(database)
    pending.base = read_altitude("SFC")
    pending.points.append(GeoPoint(51.0, 10.0))

    airspace = database.airspaces.first()
    assert airspace.base.altitude == pytest.approx(1000 * 0.3048)
    assert not airspace.base.is_terrain
    assert len(airspace.points) == 1


def test_last_point():
    pending = PendingAirspace()
    assert pending.last_point is None

    pending.points.append(GeoPoint(50.0, 10.0))
    assert pending.last_point == GeoPoint(50.0, 10.0)
