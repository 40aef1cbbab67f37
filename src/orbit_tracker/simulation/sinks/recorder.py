from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from orbit_tracker.objects.tracked_object import GeographicPosition


@dataclass
class LatestFrameSink:
    """Keeps only the most recent frame, plus a count of frames seen."""
    name: str = "latest_frame"
    time: Optional[datetime] = None
    positions: List[GeographicPosition] = field(default_factory=list)
    frame_count: int = 0

    def render(self, time: datetime, positions: List[GeographicPosition]) -> None:
        self.time = time
        self.positions = list(positions)
        self.frame_count += 1
