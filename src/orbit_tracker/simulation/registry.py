from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from orbit_tracker.errors import DuplicateIdentifier
from orbit_tracker.objects.tracked_object import TrackedObject


@dataclass
class TrackedObjectRegistry:
    """
    The set of tracked objects, keyed by object ID, in insertion order.
    Keep this pure: just data + lookup, no fetching or stepping logic.
    """
    _objects: Dict[str, TrackedObject] = field(default_factory=dict, init=False)

    def add(self, obj: TrackedObject) -> None:
        if obj.object_id in self._objects:
            raise DuplicateIdentifier(obj.object_id)
        self._objects[obj.object_id] = obj

    def remove(self, object_id: str) -> bool:
        return self._objects.pop(object_id, None) is not None

    def contains(self, object_id: str) -> bool:
        return object_id in self._objects

    def get(self, object_id: str) -> Optional[TrackedObject]:
        return self._objects.get(object_id)

    def values(self) -> List[TrackedObject]:
        return list(self._objects.values())

    def ids(self) -> List[str]:
        return list(self._objects.keys())

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    def __len__(self) -> int:
        return len(self._objects)
