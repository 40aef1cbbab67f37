"""
Tests for coordinate frame transformations.
"""
import math
from datetime import datetime, timezone

import pytest

from orbit_tracker.core.constants import WGS84_A_KM, WGS84_B_KM
from orbit_tracker.core.frames import (
    rot3,
    julian_date, gmst_rad, wrap_to_pi,
    eci_to_ecef_km, eci_to_geodetic,
)


class TestRotations:
    def test_rot3_90_degrees(self):
        # Rotate (1,0,0) by 90 degrees about z-axis -> should give (0,1,0)
        result = rot3(math.pi / 2, (1.0, 0.0, 0.0))
        assert abs(result[0] - 0.0) < 1e-10
        assert abs(result[1] - 1.0) < 1e-10
        assert abs(result[2] - 0.0) < 1e-10

    def test_rot3_identity(self):
        v = (1.0, 2.0, 3.0)
        assert rot3(0.0, v) == v

    def test_eci_to_ecef_undoes_earth_rotation(self):
        # A point on the x-axis seen from a frame rotated by +90 degrees
        r = eci_to_ecef_km((7000.0, 0.0, 0.0), math.pi / 2)
        assert abs(r[0]) < 1e-9
        assert abs(r[1] + 7000.0) < 1e-9
        assert r[2] == 0.0


class TestSiderealTime:
    def test_julian_date_j2000(self):
        jd, fr = julian_date(datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
        assert jd + fr == pytest.approx(2451545.0, abs=1e-9)

    def test_naive_datetime_treated_as_utc(self):
        aware = julian_date(datetime(2021, 10, 2, 12, tzinfo=timezone.utc))
        naive = julian_date(datetime(2021, 10, 2, 12))
        assert aware == naive

    def test_gmst_at_j2000(self):
        gmst = gmst_rad(datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
        assert math.degrees(gmst) == pytest.approx(280.46061837, abs=1e-6)

    def test_gmst_range(self):
        for hour in range(0, 24, 3):
            gmst = gmst_rad(datetime(2021, 10, 2, hour, tzinfo=timezone.utc))
            assert 0.0 <= gmst < 2 * math.pi

    def test_gmst_advances_one_sidereal_turn_per_day(self):
        t = datetime(2021, 10, 2, 0, tzinfo=timezone.utc)
        g0 = gmst_rad(t)
        g1 = gmst_rad(t.replace(hour=1))
        # ~15.041 degrees per hour
        assert math.degrees((g1 - g0) % (2 * math.pi)) == pytest.approx(15.041, abs=1e-3)


class TestWrap:
    def test_wrap_to_pi(self):
        assert wrap_to_pi(0.0) == 0.0
        assert wrap_to_pi(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
        assert wrap_to_pi(-3 * math.pi / 2) == pytest.approx(math.pi / 2)
        assert -math.pi <= wrap_to_pi(math.pi) < math.pi


class TestGeodetic:
    def test_equator_prime_meridian(self):
        lat, lon, h = eci_to_geodetic((WGS84_A_KM + 400.0, 0.0, 0.0), 0.0)
        assert abs(lat) < 1e-12
        assert abs(lon) < 1e-12
        assert h == pytest.approx(400.0, abs=1e-9)

    def test_longitude_follows_earth_rotation(self):
        # Same inertial point, Earth turned 90 degrees east -> longitude -90
        _lat, lon, _h = eci_to_geodetic((WGS84_A_KM, 0.0, 0.0), math.pi / 2)
        assert math.degrees(lon) == pytest.approx(-90.0)

    def test_north_pole_axis(self):
        lat, _lon, h = eci_to_geodetic((0.0, 0.0, 7000.0), 1.0)
        assert lat == pytest.approx(math.pi / 2)
        assert h == pytest.approx(7000.0 - WGS84_B_KM)

    def test_south_pole_axis(self):
        lat, _lon, h = eci_to_geodetic((0.0, 0.0, -7000.0), 0.0)
        assert lat == pytest.approx(-math.pi / 2)
        assert h == pytest.approx(7000.0 - WGS84_B_KM)

    def test_longitude_is_earth_fixed_longitude(self):
        r_eci = (4000.0, 3000.0, 2500.0)
        gmst = 1.234
        x, y, _z = eci_to_ecef_km(r_eci, gmst)
        _lat, lon, _h = eci_to_geodetic(r_eci, gmst)
        assert lon == pytest.approx(math.atan2(y, x))

    def test_mid_latitude_surface_point(self):
        # Surface point at geodetic latitude 45 deg built from the ellipsoid
        a, b = WGS84_A_KM, WGS84_B_KM
        e2 = 1.0 - (b * b) / (a * a)
        phi = math.radians(45.0)
        n = a / math.sqrt(1.0 - e2 * math.sin(phi) ** 2)
        r = (n * math.cos(phi), 0.0, n * (1.0 - e2) * math.sin(phi))

        lat, _lon, h = eci_to_geodetic(r, 0.0)
        assert math.degrees(lat) == pytest.approx(45.0, abs=1e-8)
        assert h == pytest.approx(0.0, abs=1e-6)
