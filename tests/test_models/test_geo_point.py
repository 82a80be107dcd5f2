"""
Tests for GeoPoint distance and bearing calculations.
"""

import pytest

from euro_airspace.models.geo_point import GeoPoint


class TestGeoPoint:

    def test_latitude_is_validated(self):
        with pytest.raises(ValueError):
            GeoPoint(90.5, 0.0)
        with pytest.raises(ValueError):
            GeoPoint(-91.0, 0.0)

    @pytest.mark.parametrize("longitude,expected", [
        (10.0, 10.0),
        (180.0, -180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (360.0, 0.0),
    ])
    def test_normalize(self, longitude, expected):
        assert GeoPoint(45.0, longitude).normalize().longitude == pytest.approx(expected)

    def test_one_degree_of_latitude(self):
        a = GeoPoint(50.0, 10.0)
        b = GeoPoint(51.0, 10.0)

        vector = a.distance_bearing(b)

        assert vector.distance == pytest.approx(111195, rel=1e-3)
        assert vector.bearing == pytest.approx(0.0)

    @pytest.mark.parametrize("bearing", [0.0, 45.0, 90.0, 135.0, 200.0, 315.0])
    def test_project_and_measure_back(self, bearing):
        center = GeoPoint(53.5, 10.0)

        point = center.point_from_bearing_distance(bearing, 5 * 1852)
        vector = center.distance_bearing(point)

        assert vector.distance == pytest.approx(5 * 1852, rel=1e-9)
        assert vector.bearing == pytest.approx(bearing, abs=1e-6)

    def test_projection_across_antimeridian(self):
        point = GeoPoint(0.0, 179.9).point_from_bearing_distance(90.0, 50000)

        assert -180.0 <= point.longitude < 180.0
        assert point.longitude < 0

    def test_bearing_to(self):
        assert GeoPoint(50.0, 10.0).bearing_to(GeoPoint(50.0, 11.0)) == pytest.approx(89.6, abs=0.1)

    def test_to_dms(self):
        point = GeoPoint(53 + 20 / 60 + 41 / 3600, -(10 + 24 / 60 + 41 / 3600))

        assert point.to_dms() == ("53:20:41 N", "010:24:41 W")

    def test_is_hashable(self):
        assert len({GeoPoint(50.0, 10.0), GeoPoint(50.0, 10.0)}) == 1
