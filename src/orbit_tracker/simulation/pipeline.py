from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from orbit_tracker.core.projection import GeodeticProjector
from orbit_tracker.core.propagator import PropagationAdapter, Sgp4Propagator
from orbit_tracker.objects.tracked_object import GeographicPosition
from orbit_tracker.simulation.registry import TrackedObjectRegistry

logger = logging.getLogger(__name__)


@dataclass
class PositionPipeline:
    """
    Per-tick map: every tracked object -> propagate -> project.
    Objects with no position at `time` are left out of the result.
    """
    propagator: PropagationAdapter = field(default_factory=Sgp4Propagator)
    projector: GeodeticProjector = field(default_factory=GeodeticProjector)

    def compute_positions(self, registry: TrackedObjectRegistry, time: datetime) -> List[GeographicPosition]:
        positions: List[GeographicPosition] = []
        dropped = 0

        for obj in registry.values():
            r_eci = self.propagator.propagate(obj.elements, time)
            if r_eci is None:
                dropped += 1
                continue
            positions.append(self.projector.project(r_eci, time, obj.object_id, obj.name))

        if dropped:
            logger.debug("%d object(s) without a position at %s", dropped, time.isoformat())
        return positions
