from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from orbit_tracker.objects.tracked_object import GeographicPosition
from orbit_tracker.simulation.clock import SimulatedClock
from orbit_tracker.simulation.pipeline import PositionPipeline
from orbit_tracker.simulation.registry import TrackedObjectRegistry
from orbit_tracker.simulation.sinks.base import RenderSink

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """
    Fixed-cadence tick loop.
    Each tick: advance the clock, compute positions, hand them to every sink.
    A sink that raises is logged and skipped for that tick.
    Simulated time per tick is the clock step, independent of the cadence.
    """
    clock: SimulatedClock
    registry: TrackedObjectRegistry
    pipeline: PositionPipeline = field(default_factory=PositionPipeline)
    sinks: List[RenderSink] = field(default_factory=list)
    interval_s: float = 0.05

    def tick(self) -> List[GeographicPosition]:
        t = self.clock.advance()
        positions = self.pipeline.compute_positions(self.registry, t)
        for sink in self.sinks:
            try:
                sink.render(t, positions)
            except Exception:
                # One broken sink must not stop the tick loop or the other sinks
                logger.exception("Sink %s failed at %s", sink.name, t.isoformat())
        return positions

    async def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick every `interval_s` seconds of wall time until `max_ticks` ticks
        have run (forever if None). Yields to the event loop between ticks so
        pending fetches can complete. Returns the number of ticks run.
        """
        if self.interval_s < 0:
            raise ValueError("interval_s must be non-negative.")
        if max_ticks is not None and max_ticks < 0:
            raise ValueError("max_ticks must be non-negative.")

        count = 0
        while max_ticks is None or count < max_ticks:
            self.tick()
            count += 1
            await asyncio.sleep(self.interval_s)

        logger.debug("Engine stopped after %d ticks at %s", count, self.clock.current_time.isoformat())
        return count
