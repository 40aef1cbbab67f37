"""
Tracker settings.
Units: seconds (s), kilometres (km).

Every field can be overridden from the environment with an ORBIT_TRACKER_
prefixed variable, e.g. ORBIT_TRACKER_TIME_STEP_S=10.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional, Tuple

from orbit_tracker.core.constants import DEFAULT_TIME_STEP_S, KEEPTRACK_SAT_URL, R_EARTH_MEAN_KM

ENV_PREFIX = "ORBIT_TRACKER_"


@dataclass(frozen=True)
class TrackerConfig:
    # Clock
    time_step_s: float = DEFAULT_TIME_STEP_S
    tick_interval_s: float = 0.05

    # Projection
    reference_radius_km: float = R_EARTH_MEAN_KM

    # Fetch
    api_url_template: str = KEEPTRACK_SAT_URL
    request_timeout_s: float = 15.0
    catalog_file: Optional[str] = None

    # Start-up: the ISS
    initial_object_ids: Tuple[str, ...] = ("25544",)

    # Rendering
    globe_html: str = "out/live_globe.html"
    globe_write_every: int = 20

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        environ = os.environ if environ is None else environ
        overrides = {}

        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            try:
                overrides[f.name] = _coerce(f.name, raw)
            except ValueError as e:
                raise ValueError(f"{ENV_PREFIX}{f.name.upper()}: {e}") from e

        return replace(cls(), **overrides).validate()

    def validate(self) -> "TrackerConfig":
        if self.time_step_s <= 0:
            raise ValueError("time_step_s must be > 0")
        if self.tick_interval_s < 0:
            raise ValueError("tick_interval_s must be >= 0")
        if self.reference_radius_km <= 0:
            raise ValueError("reference_radius_km must be > 0")
        if self.request_timeout_s <= 0:
            raise ValueError("request_timeout_s must be > 0")
        if "{object_id}" not in self.api_url_template:
            raise ValueError("api_url_template must contain '{object_id}'")
        if self.globe_write_every <= 0:
            raise ValueError("globe_write_every must be > 0")
        return self


_FLOAT_FIELDS = {"time_step_s", "tick_interval_s", "reference_radius_km", "request_timeout_s"}
_INT_FIELDS = {"globe_write_every"}


def _coerce(name: str, raw: str):
    if name in _FLOAT_FIELDS:
        return float(raw)
    if name in _INT_FIELDS:
        return int(raw)
    if name == "initial_object_ids":
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    if name == "catalog_file":
        return raw or None
    return raw
