from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

import numpy as np
import plotly.graph_objects as go

from orbit_tracker.objects.tracked_object import GeographicPosition

logger = logging.getLogger(__name__)

SATELLITE_COLOR = "#ff69b4"


def build_globe_figure(time: datetime, positions: List[GeographicPosition],
                       marker_size: float = 8.0) -> go.Figure:
    """
    Orthographic globe with one marker per position.
    Marker size grows slightly with altitude so higher orbits stand out.
    """
    lats = [p.latitude_deg for p in positions]
    lons = [p.longitude_deg for p in positions]
    alts = np.array([p.altitude_fraction for p in positions], dtype=float)
    sizes = marker_size * (1.0 + np.clip(alts, 0.0, 10.0))

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lat=lats,
        lon=lons,
        text=[f"{p.name} ({p.object_id})" for p in positions],
        mode="markers",
        name="Tracked",
        marker=dict(
            size=sizes.tolist(),
            color=SATELLITE_COLOR,
            opacity=0.9,
            symbol="diamond",
        ),
    ))

    fig.update_geos(
        projection_type="orthographic",
        showland=True,
        showocean=True,
        oceancolor="#0b3d91",
        landcolor="#2e7d32",
    )
    fig.update_layout(
        title=time.strftime("%a %b %d %Y %H:%M:%S UTC"),
        margin=dict(l=0, r=0, t=40, b=0),
        showlegend=False,
    )
    return fig


@dataclass
class PlotlyGlobeSink:
    """
    Writes the latest frame to an HTML globe every `write_every` ticks.
    Only the current frame is drawn; no track history.
    """
    out_html: str = "out/live_globe.html"
    write_every: int = 20
    name: str = "plotly_globe"
    frames_seen: int = 0

    def __post_init__(self):
        if self.write_every <= 0:
            raise ValueError("write_every must be positive.")

    def render(self, time: datetime, positions: List[GeographicPosition]) -> None:
        self.frames_seen += 1
        if (self.frames_seen - 1) % self.write_every != 0:
            return
        self.write(time, positions)

    def write(self, time: datetime, positions: List[GeographicPosition]) -> str:
        fig = build_globe_figure(time, positions)
        Path(self.out_html).parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(self.out_html, auto_open=False)
        logger.debug("Wrote %d positions to %s", len(positions), self.out_html)
        return self.out_html
