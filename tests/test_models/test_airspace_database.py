"""
Tests for the in-memory airspace database, its queries and exports.
"""

import json
from datetime import date

import pytest

from euro_airspace.models import (
    AirspaceActivity,
    AirspaceCircle,
    AirspaceClass,
    AirspaceCollection,
    AirspaceDatabase,
    AirspacePolygon,
    GeoPoint,
)
from euro_airspace.parsers.altitude import read_altitude

SQUARE = (GeoPoint(50.0, 10.0), GeoPoint(50.0, 11.0), GeoPoint(51.0, 11.0), GeoPoint(51.0, 10.0))


@pytest.fixture
def populated_database() -> AirspaceDatabase:
    database = AirspaceDatabase()
    database.insert(AirspacePolygon(
        name="HAMBURG CTR",
        airspace_class=AirspaceClass.CTR,
        base=read_altitude("SFC"),
        top=read_altitude("2500ft MSL"),
        radio="120.100",
        points=SQUARE,
    ))
    database.insert(AirspaceCircle(
        name="ED-R 123",
        airspace_class=AirspaceClass.RESTRICT,
        base=read_altitude("FL65"),
        top=read_altitude("FL100"),
        center=GeoPoint(53.0, 10.0),
        radius=4630.0,
        days_of_operation=AirspaceActivity.weekdays(),
    ))
    database.insert(AirspacePolygon(
        name="BREMEN TMA",
        airspace_class=AirspaceClass.CLASSD,
        base=read_altitude("1500ft MSL"),
        top=read_altitude("FL65"),
        points=SQUARE,
        days_of_operation=AirspaceActivity.weekend(),
    ))
    return database


class TestAirspaceDatabase:

    def test_insert_keeps_file_order(self, populated_database):
        assert len(populated_database) == 3
        assert [a.name for a in populated_database] == ["HAMBURG CTR", "ED-R 123", "BREMEN TMA"]

    def test_clear(self, populated_database):
        populated_database.clear()

        assert len(populated_database) == 0

    def test_to_dict(self, populated_database):
        result = populated_database.to_dict()

        assert result['count'] == 3
        assert result['airspaces'][1]['shape'] == "circle"
        assert result['airspaces'][0]['base']['text'] == "SFC"

    def test_save_to_json(self, populated_database, tmp_path):
        path = tmp_path / 'airspaces.json'

        populated_database.save_to_json(path)

        with open(path) as f:
            data = json.load(f)
        assert data['count'] == 3
        assert data['airspaces'][2]['name'] == "BREMEN TMA"
        assert data['airspaces'][0]['points'][0] == [50.0, 10.0]

    def test_to_dataframe(self, populated_database):
        df = populated_database.to_dataframe()

        assert len(df) == 3
        assert list(df.columns) == ['name', 'class', 'shape', 'radio', 'base', 'top',
                                    'base_reference', 'top_reference', 'active', 'vertices', 'radius_m']
        assert df.loc[0, 'name'] == "HAMBURG CTR"
        assert df.loc[0, 'base'] == "SFC"
        assert df.loc[0, 'top'] == "2500ft MSL"
        assert df.loc[0, 'vertices'] == 4
        assert df.loc[1, 'shape'] == "circle"
        assert df.loc[1, 'radius_m'] == 4630.0
        assert df.loc[1, 'active'] == "weekday"
        assert df.loc[2, 'top_reference'] == "FL"

    def test_empty_dataframe_has_columns(self):
        df = AirspaceDatabase().to_dataframe()

        assert len(df) == 0
        assert 'name' in df.columns


class TestAirspaceCollection:

    def test_airspaces_is_collection(self, populated_database):
        assert isinstance(populated_database.airspaces, AirspaceCollection)

    def test_by_class(self, populated_database):
        airspaces = populated_database.airspaces

        assert airspaces.by_class(AirspaceClass.CTR).count() == 1
        assert airspaces.by_class('restrict', 'classd').count() == 2
        assert airspaces.by_class(AirspaceClass.DANGER).count() == 0

    def test_by_name_contains(self, populated_database):
        result = populated_database.airspaces.by_name_contains("ed-r")

        assert result.first().name == "ED-R 123"

    def test_shapes(self, populated_database):
        airspaces = populated_database.airspaces

        assert airspaces.polygons().count() == 2
        assert airspaces.circles().first().name == "ED-R 123"

    def test_active_on(self, populated_database):
        saturday = populated_database.airspaces.active_on(date(2024, 6, 1))
        monday = populated_database.airspaces.active_on(date(2024, 6, 3))

        assert [a.name for a in saturday] == ["HAMBURG CTR", "BREMEN TMA"]
        assert [a.name for a in monday] == ["HAMBURG CTR", "ED-R 123"]

    def test_with_radio(self, populated_database):
        assert [a.name for a in populated_database.airspaces.with_radio()] == ["HAMBURG CTR"]

    def test_group_by_class(self, populated_database):
        groups = populated_database.airspaces.group_by_class()

        assert set(groups.keys()) == {"CTR", "RESTRICT", "CLASSD"}
        assert len(groups["CTR"]) == 1

    def test_chaining(self, populated_database):
        result = populated_database.airspaces.polygons().active_on(date(2024, 6, 1)).by_class('CLASSD')

        assert result.count() == 1
        assert result.first().name == "BREMEN TMA"

    def test_generic_queries(self, populated_database):
        airspaces = populated_database.airspaces

        assert airspaces.where(name="ED-R 123").first().radius == 4630.0
        assert airspaces.filter(lambda a: a.top.flight_level >= 65).count() == 2
        assert airspaces.order_by(lambda a: a.name).first().name == "BREMEN TMA"
        assert airspaces.take(2).count() == 2
        assert airspaces.last().name == "BREMEN TMA"
        assert airspaces.exists()
        assert not airspaces.by_class(AirspaceClass.WAVE)

    def test_union(self, populated_database):
        airspaces = populated_database.airspaces

        result = airspaces.by_class(AirspaceClass.CTR) | airspaces.circles() | airspaces.by_class(AirspaceClass.CTR)

        assert result.count() == 2

    def test_repr(self, populated_database):
        assert repr(populated_database.airspaces) == (
            "AirspaceCollection(['HAMBURG CTR', 'ED-R 123', 'BREMEN TMA'], count=3)"
        )

    def test_returned_collection_does_not_change_database(self, populated_database):
        populated_database.airspaces.all().clear()

        assert len(populated_database) == 3
