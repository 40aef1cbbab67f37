from __future__ import annotations

# WGS-84 ellipsoid, km
WGS84_A_KM: float = 6378.137
WGS84_B_KM: float = 6356.7523142

# Mean Earth radius in km, used to normalise altitude for rendering
R_EARTH_MEAN_KM: float = 6371.0

# Julian date of J2000.0
JD_J2000: float = 2451545.0

# Simulated seconds per tick
DEFAULT_TIME_STEP_S: float = 3.0

KEEPTRACK_SAT_URL: str = "https://api.keeptrack.space/v1/sat/{object_id}"
