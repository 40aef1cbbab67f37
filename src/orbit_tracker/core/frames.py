from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Tuple

from sgp4.api import jday

from orbit_tracker.core.constants import JD_J2000, WGS84_A_KM, WGS84_B_KM

Vector3 = Tuple[float, float, float]

TWO_PI = 2.0 * math.pi

# Bounded iteration count for the geodetic latitude fixed point
_GEODETIC_MAX_ITER = 20
_GEODETIC_TOL_RAD = 1e-12


def rot3(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (c * x - s * y, s * x + c * y, z)


def julian_date(t: datetime) -> Tuple[float, float]:
    """
    Split Julian date (jd, fraction) for a timezone-aware datetime.
    Naive datetimes are treated as UTC.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    else:
        t = t.astimezone(timezone.utc)
    return jday(
        t.year, t.month, t.day,
        t.hour, t.minute,
        t.second + t.microsecond * 1e-6,
    )


def gmst_rad(t: datetime) -> float:
    """
    Greenwich mean sidereal time (IAU-82), UT1 taken as UTC.
    Returns an angle in [0, 2*pi).
    """
    jd, fr = julian_date(t)
    tut1 = ((jd - JD_J2000) + fr) / 36525.0
    seconds = (
        -6.2e-6 * tut1 ** 3
        + 0.093104 * tut1 ** 2
        + (876600.0 * 3600.0 + 8640184.812866) * tut1
        + 67310.54841
    )
    # 240 sidereal seconds per degree
    return math.radians(seconds / 240.0) % TWO_PI


def eci_to_ecef_km(r_eci: Vector3, gmst: float) -> Vector3:
    """
    ECEF = R3(-gmst) * ECI
    """
    return rot3(-gmst, r_eci)


def wrap_to_pi(angle_rad: float) -> float:
    """Wrap an angle to [-pi, pi)."""
    return ((angle_rad + math.pi) % TWO_PI) - math.pi


def eci_to_geodetic(r_eci: Vector3, gmst: float) -> Tuple[float, float, float]:
    """
    Inertial position (km) -> Earth-fixed -> geodetic (lat_rad, lon_rad, height_km) on WGS-84.

    Latitude is solved by fixed-point iteration, capped at a small number of
    rounds. Points on the polar axis are handled in closed form.
    """
    x, y, z = eci_to_ecef_km(r_eci, gmst)
    a = WGS84_A_KM
    b = WGS84_B_KM
    f = (a - b) / a
    e2 = 2.0 * f - f * f

    r_xy = math.sqrt(x * x + y * y)
    lon = wrap_to_pi(math.atan2(y, x))

    if r_xy < 1e-9:
        lat = math.copysign(math.pi / 2.0, z) if z != 0.0 else 0.0
        height = abs(z) - b if z != 0.0 else -a
        return lat, lon, height

    lat = math.atan2(z, r_xy)
    c = 1.0
    for _ in range(_GEODETIC_MAX_ITER):
        c = 1.0 / math.sqrt(1.0 - e2 * math.sin(lat) ** 2)
        new_lat = math.atan2(z + a * c * e2 * math.sin(lat), r_xy)
        if abs(new_lat - lat) < _GEODETIC_TOL_RAD:
            lat = new_lat
            break
        lat = new_lat

    c = 1.0 / math.sqrt(1.0 - e2 * math.sin(lat) ** 2)
    height = r_xy / math.cos(lat) - a * c
    return lat, lon, height
