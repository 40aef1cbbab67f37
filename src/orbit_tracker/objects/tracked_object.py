from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orbit_tracker.core.tle import ElementSet


def default_name(object_id: str) -> str:
    return f"Satellite {object_id}"


@dataclass(frozen=True)
class TrackedObject:
    """
    A satellite the user asked to follow.
    The element set is fetched once and never changes afterwards.
    """
    object_id: str
    name: str
    elements: ElementSet

    def __post_init__(self):
        if not self.object_id.strip():
            raise ValueError("Object ID cannot be empty or whitespace.")
        if not self.name.strip():
            object.__setattr__(self, "name", default_name(self.object_id))


@dataclass(frozen=True)
class GeographicPosition:
    """
    Where a tracked object is at one tick.

    altitude_fraction is geodetic height divided by the reference radius, so
    a renderer can scale it against its own globe radius.
    """
    object_id: str
    name: str
    latitude_deg: float
    longitude_deg: float
    altitude_fraction: float
    time: datetime
