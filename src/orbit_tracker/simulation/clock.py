from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TimeListener = Callable[[datetime], None]


@dataclass
class SimulatedClock:
    """
    Virtual timeline that moves forward a fixed step per tick.

    Time only ever increases. It is computed as start + ticks * step rather
    than accumulated, so N advances always land exactly on T0 + N*S.
    """
    step: timedelta
    start: Optional[datetime] = None
    _ticks: int = field(default=0, init=False, repr=False)
    _listeners: List[TimeListener] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if self.step <= timedelta(0):
            raise ValueError("Clock step must be positive.")
        if self.start is None:
            self.start = datetime.now(timezone.utc)
        elif self.start.tzinfo is None:
            raise ValueError("Clock start must be timezone-aware.")

    @classmethod
    def from_seconds(cls, step_s: float, start: Optional[datetime] = None) -> "SimulatedClock":
        return cls(step=timedelta(seconds=step_s), start=start)

    @property
    def current_time(self) -> datetime:
        return self.start + self.step * self._ticks

    @property
    def ticks(self) -> int:
        return self._ticks

    def advance(self) -> datetime:
        self._ticks += 1
        now = self.current_time
        for listener in self._listeners:
            try:
                listener(now)
            except Exception:
                logger.exception("Clock listener %r failed at %s", listener, now.isoformat())
        return now

    def subscribe(self, listener: TimeListener) -> None:
        """
        Receive every new time after advance(). Listeners cannot affect the
        clock: one that raises is logged and the advance still completes.
        """
        self._listeners.append(listener)
