"""
Orbital element fetchers.

KeepTrackFetcher asks the public keeptrack.space API for one satellite at a
time. CatalogFetcher serves element sets from a local TLE file for offline
runs. Both raise FetchFailed for anything that does not end in a usable
element set; neither retries.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

import requests

from orbit_tracker.core.constants import KEEPTRACK_SAT_URL
from orbit_tracker.core.tle import ElementSet, load_tle_file, parse_tle
from orbit_tracker.errors import FetchFailed
from orbit_tracker.objects.tracked_object import default_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedElements:
    name: str
    elements: ElementSet


class OrbitalElementsFetcher(Protocol):
    async def fetch_orbital_elements(self, object_id: str) -> FetchedElements:
        ...


def _looks_like_html(text: str) -> bool:
    t = (text or "").lower()
    return ("<html" in t) or ("<!doctype html" in t)


def parse_keeptrack_payload(object_id: str, data: Any) -> FetchedElements:
    """
    Pull name/tle1/tle2 out of a keeptrack satellite record.
    A missing name falls back to the generated display name.
    """
    if not isinstance(data, dict):
        raise FetchFailed(object_id, "Malformed satellite data (expected a JSON object)")

    tle1 = data.get("tle1")
    tle2 = data.get("tle2")
    if not isinstance(tle1, str) or not isinstance(tle2, str):
        raise FetchFailed(object_id, "Malformed satellite data (missing tle1/tle2)")

    try:
        elements = parse_tle(tle1, tle2)
    except ValueError as e:
        raise FetchFailed(object_id, f"Malformed satellite data ({e})") from e

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        name = default_name(object_id)

    return FetchedElements(name=name.strip(), elements=elements)


class KeepTrackFetcher:
    """
    GET {url_template} for one object ID, single attempt.

    The blocking request runs in a worker thread so the tick loop keeps
    running while it is in flight.
    """

    def __init__(self,
                 url_template: str = KEEPTRACK_SAT_URL,
                 timeout_s: float = 15.0,
                 session: Optional[requests.Session] = None):
        self.url_template = url_template
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch_blocking(self, object_id: str) -> FetchedElements:
        url = self.url_template.format(object_id=object_id)

        try:
            resp = self.session.get(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.error("Error fetching satellite %s TLE data: %s", object_id, e)
            raise FetchFailed(object_id, f"Failed to fetch satellite data ({e})") from e

        if not 200 <= resp.status_code < 300:
            logger.error("Error fetching satellite %s TLE data: HTTP %s", object_id, resp.status_code)
            raise FetchFailed(object_id, f"Failed to fetch satellite data (Status: {resp.status_code})")

        if _looks_like_html(resp.text):
            raise FetchFailed(object_id, "Malformed satellite data (got an HTML page)")

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchFailed(object_id, "Malformed satellite data (invalid JSON)") from e

        return parse_keeptrack_payload(object_id, data)

    async def fetch_orbital_elements(self, object_id: str) -> FetchedElements:
        return await asyncio.to_thread(self.fetch_blocking, object_id)


class CatalogFetcher:
    """
    Element sets from a local 2-line / 3-line TLE file, keyed by catalog number.
    The file is read once, on construction.
    """

    def __init__(self, entries: Dict[str, FetchedElements]):
        self.entries = dict(entries)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "CatalogFetcher":
        entries: Dict[str, FetchedElements] = {}
        for name, elements in load_tle_file(filepath):
            object_id = str(elements.catalog_number)
            entries[object_id] = FetchedElements(name=name or default_name(object_id), elements=elements)
        logger.info("Loaded %d element sets from %s", len(entries), filepath)
        return cls(entries)

    async def fetch_orbital_elements(self, object_id: str) -> FetchedElements:
        # Catalog numbers are written without leading zeros once parsed
        key = object_id.lstrip("0") or "0"
        try:
            return self.entries[key]
        except KeyError:
            raise FetchFailed(object_id, f"Satellite {object_id} not in catalog") from None
