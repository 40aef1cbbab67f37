"""
Live tracking demo: add satellites by catalog number, tick the simulated
clock and write the current globe to HTML.

    orbit-track 25544 44713 --ticks 600 --step 3
    orbit-track --catalog stations.txt 25544
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from orbit_tracker.config import TrackerConfig
from orbit_tracker.core.projection import GeodeticProjector
from orbit_tracker.data.fetcher import CatalogFetcher, KeepTrackFetcher
from orbit_tracker.errors import TrackingError
from orbit_tracker.logging_config import configure_logging
from orbit_tracker.simulation.clock import SimulatedClock
from orbit_tracker.simulation.controller import TrackingController
from orbit_tracker.simulation.engine import Engine
from orbit_tracker.simulation.pipeline import PositionPipeline
from orbit_tracker.simulation.registry import TrackedObjectRegistry
from orbit_tracker.visualization.plotly_globe import PlotlyGlobeSink

logger = logging.getLogger("orbit_tracker.live_track")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Live satellite tracking on a simulated clock.")
    parser.add_argument("ids", nargs="*", help="Catalog numbers to track (default: the ISS)")
    parser.add_argument("--ticks", type=int, default=200, help="Ticks to run (0 = forever)")
    parser.add_argument("--step", type=float, default=None, help="Simulated seconds per tick")
    parser.add_argument("--interval", type=float, default=None, help="Wall seconds between ticks")
    parser.add_argument("--start", default=None, help="Simulated start time, ISO 8601 (default: now, UTC)")
    parser.add_argument("--catalog", default=None, help="Serve element sets from a local TLE file")
    parser.add_argument("--html", default=None, help="Globe HTML output path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> TrackerConfig:
    config = TrackerConfig.from_env()
    overrides = {}
    if args.ids:
        overrides["initial_object_ids"] = tuple(args.ids)
    if args.step is not None:
        overrides["time_step_s"] = args.step
    if args.interval is not None:
        overrides["tick_interval_s"] = args.interval
    if args.catalog is not None:
        overrides["catalog_file"] = args.catalog
    if args.html is not None:
        overrides["globe_html"] = args.html
    return replace(config, **overrides).validate()


def parse_start(raw: Optional[str]) -> Optional[datetime]:
    """ISO 8601 start time; naive values are taken as UTC."""
    if raw is None:
        return None
    start = datetime.fromisoformat(raw)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    return start


async def run(config: TrackerConfig, max_ticks: Optional[int],
              start: Optional[datetime] = None) -> int:
    if config.catalog_file:
        fetcher = CatalogFetcher.from_file(config.catalog_file)
    else:
        fetcher = KeepTrackFetcher(config.api_url_template, timeout_s=config.request_timeout_s)

    registry = TrackedObjectRegistry()
    controller = TrackingController(registry, fetcher)
    clock = SimulatedClock.from_seconds(config.time_step_s, start=start)
    clock.subscribe(lambda t: logger.debug("Clock %s", t.isoformat()))

    engine = Engine(
        clock=clock,
        registry=registry,
        pipeline=PositionPipeline(projector=GeodeticProjector(config.reference_radius_km)),
        sinks=[PlotlyGlobeSink(out_html=config.globe_html, write_every=config.globe_write_every)],
        interval_s=config.tick_interval_s,
    )

    async def add(object_id: str) -> None:
        try:
            await controller.request_add(object_id)
        except TrackingError as e:
            print(f"{object_id}: {e}", file=sys.stderr)

    # Fetches resolve while the engine is already ticking
    adds = asyncio.gather(*(add(object_id) for object_id in config.initial_object_ids))
    ticks = await engine.run(max_ticks)
    await adds

    print(f"Simulated time: {clock.current_time.isoformat()} after {ticks} ticks")
    for obj in controller.tracked():
        print(f"  {obj.name} ({obj.object_id})")
    return 0 if len(registry) else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = config_from_args(args)
        start = parse_start(args.start)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    max_ticks = args.ticks if args.ticks > 0 else None
    return asyncio.run(run(config, max_ticks, start))


if __name__ == "__main__":
    sys.exit(main())
