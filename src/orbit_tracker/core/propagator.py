"""
Propagation capability: element set + time -> inertial position, or nothing.

The numerical model is the `sgp4` library; this module only adapts it to the
vector-or-absence contract the position pipeline consumes.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Optional, Protocol

import numpy as np
from sgp4.api import Satrec

from orbit_tracker.core.frames import Vector3, julian_date
from orbit_tracker.core.tle import ElementSet

logger = logging.getLogger(__name__)


# SGP4 error code meanings
SGP4_ERROR_CODES = {
    0: "No error",
    1: "Mean eccentricity < 0.0 or > 1.0",
    2: "Mean motion < 0.0",
    3: "Perturbed eccentricity < 0.0 or > 1.0",
    4: "Semi-latus rectum < 0.0",
    5: "Satellite has decayed",
    6: "Satellite has decayed (low altitude)",
}


class PropagationAdapter(Protocol):
    """
    Anything that maps (elements, time) to an ECI position in km.
    Returning None means "no position at this time" and is not an error.
    """

    def propagate(self, elements: ElementSet, time: datetime) -> Optional[Vector3]:
        ...


@lru_cache(maxsize=1024)
def satrec_from_elements(elements: ElementSet) -> Satrec:
    return Satrec.twoline2rv(elements.line1, elements.line2)


class Sgp4Propagator:
    """
    SGP4 propagation to TEME position (km).

    Satrec objects are cached per element set; Satrec.sgp4 does not mutate
    the record's elements, so repeated calls with the same inputs agree.
    """

    def propagate(self, elements: ElementSet, time: datetime) -> Optional[Vector3]:
        satrec = satrec_from_elements(elements)
        jd, fr = julian_date(time)

        error, r_km, _v_kms = satrec.sgp4(jd, fr)
        if error != 0:
            logger.debug(
                "SGP4 error %d for catalog %s at %s: %s",
                error, elements.catalog_number, time.isoformat(),
                SGP4_ERROR_CODES.get(error, f"Unknown error code {error}"),
            )
            return None

        r = np.asarray(r_km, dtype=float)
        if not np.all(np.isfinite(r)):
            logger.debug("Non-finite SGP4 position for catalog %s", elements.catalog_number)
            return None

        return (float(r[0]), float(r[1]), float(r[2]))
