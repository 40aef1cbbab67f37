from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from orbit_tracker.core.constants import R_EARTH_MEAN_KM
from orbit_tracker.core.frames import Vector3, eci_to_geodetic, gmst_rad
from orbit_tracker.objects.tracked_object import GeographicPosition


@dataclass(frozen=True)
class GeodeticProjector:
    """
    Inertial position -> latitude / longitude / normalised altitude.
    Uses GMST at `time` as the Earth rotation reference.
    """
    reference_radius_km: float = R_EARTH_MEAN_KM

    def __post_init__(self):
        if self.reference_radius_km <= 0:
            raise ValueError("Reference radius must be positive.")

    def project(self, r_eci_km: Vector3, time: datetime,
                object_id: str = "", name: str = "") -> GeographicPosition:
        lat_rad, lon_rad, height_km = eci_to_geodetic(r_eci_km, gmst_rad(time))
        return GeographicPosition(
            object_id=object_id,
            name=name,
            latitude_deg=math.degrees(lat_rad),
            longitude_deg=math.degrees(lon_rad),
            altitude_fraction=height_km / self.reference_radius_km,
            time=time,
        )
