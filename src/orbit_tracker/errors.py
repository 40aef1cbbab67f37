from __future__ import annotations


class TrackingError(Exception):
    """Base class for failures reported to whoever asked for a change."""


class AlreadyTracked(TrackingError):
    def __init__(self, object_id: str):
        super().__init__("Satellite is already being tracked")
        self.object_id = object_id


class FetchFailed(TrackingError):
    """Orbital elements could not be retrieved or were not usable."""

    def __init__(self, object_id: str, reason: str):
        super().__init__(reason)
        self.object_id = object_id
        self.reason = reason


class DuplicateIdentifier(TrackingError, ValueError):
    """Registry insert for an ID that is already present."""

    def __init__(self, object_id: str):
        super().__init__(f"Duplicate object ID: {object_id}")
        self.object_id = object_id
