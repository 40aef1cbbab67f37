from __future__ import annotations

from datetime import datetime
from typing import List, Protocol

from orbit_tracker.objects.tracked_object import GeographicPosition


class RenderSink(Protocol):
    """
    Consumer of one tick's positions.
    Called once per tick with a fresh, ordered list.
    """
    name: str

    def render(self, time: datetime, positions: List[GeographicPosition]) -> None:
        ...
