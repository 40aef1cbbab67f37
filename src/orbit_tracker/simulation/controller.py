"""
Add / remove requests against the registry.

request_add is a two-phase operation: an awaited fetch, then a synchronous
commit. Nothing in the registry changes until the commit, and the commit is a
single dict insert, so ticks running during the fetch never see a partial
object.

Removing an ID while its add is still fetching does not cancel the add; the
object shows up again once the fetch completes.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from orbit_tracker.data.fetcher import OrbitalElementsFetcher
from orbit_tracker.errors import AlreadyTracked, DuplicateIdentifier, FetchFailed, TrackingError
from orbit_tracker.objects.tracked_object import TrackedObject
from orbit_tracker.simulation.registry import TrackedObjectRegistry

logger = logging.getLogger(__name__)


class TrackingController:
    def __init__(self, registry: TrackedObjectRegistry, fetcher: OrbitalElementsFetcher):
        self.registry = registry
        self.fetcher = fetcher
        # Most recent failure message, for a status line; cleared on success
        self.last_error: Optional[str] = None

    async def request_add(self, object_id: str) -> TrackedObject:
        """
        Fetch elements for `object_id` and start tracking it.

        Raises:
            ValueError: blank ID.
            AlreadyTracked: the ID is already in the registry.
            FetchFailed: the elements could not be retrieved or parsed.
        """
        object_id = object_id.strip()
        if not object_id:
            raise ValueError("Object ID cannot be empty or whitespace.")

        try:
            if self.registry.contains(object_id):
                raise AlreadyTracked(object_id)

            logger.info("Fetching satellite data for %s...", object_id)
            try:
                fetched = await self.fetcher.fetch_orbital_elements(object_id)
            except FetchFailed:
                raise
            except ValueError as e:
                raise FetchFailed(object_id, str(e)) from e

            obj = TrackedObject(object_id=object_id, name=fetched.name, elements=fetched.elements)
            try:
                self.registry.add(obj)
            except DuplicateIdentifier:
                # A concurrent add for the same ID committed while we fetched
                raise AlreadyTracked(object_id) from None
        except TrackingError as e:
            self.last_error = str(e)
            logger.warning("Add %s failed: %s", object_id, e)
            raise

        self.last_error = None
        logger.info("Tracking %s (%s)", obj.name, obj.object_id)
        return obj

    def request_remove(self, object_id: str) -> bool:
        """Stop tracking `object_id`. Unknown IDs are a no-op."""
        removed = self.registry.remove(object_id.strip())
        self.last_error = None
        if removed:
            logger.info("Stopped tracking %s", object_id)
        return removed

    def tracked(self) -> List[TrackedObject]:
        return self.registry.values()
