from datetime import datetime, timedelta, timezone

import pytest

from orbit_tracker.simulation.clock import SimulatedClock


class TestSimulatedClock:
    def test_seeded_from_wall_clock(self):
        before = datetime.now(timezone.utc)
        clock = SimulatedClock(step=timedelta(seconds=3))
        after = datetime.now(timezone.utc)
        assert before <= clock.current_time <= after

    def test_advance_returns_new_time(self, t0):
        clock = SimulatedClock(step=timedelta(seconds=3), start=t0)
        assert clock.advance() == t0 + timedelta(seconds=3)
        assert clock.current_time == t0 + timedelta(seconds=3)

    def test_n_advances_land_exactly(self, t0):
        step = timedelta(seconds=3)
        clock = SimulatedClock(step=step, start=t0)
        for _ in range(1000):
            clock.advance()
        assert clock.current_time == t0 + 1000 * step
        assert clock.ticks == 1000

    def test_monotonic(self, t0):
        clock = SimulatedClock.from_seconds(0.5, start=t0)
        times = [clock.advance() for _ in range(50)]
        assert all(b > a for a, b in zip(times, times[1:]))

    def test_rejects_non_positive_step(self, t0):
        with pytest.raises(ValueError, match="Clock step must be positive"):
            SimulatedClock(step=timedelta(0), start=t0)
        with pytest.raises(ValueError, match="Clock step must be positive"):
            SimulatedClock.from_seconds(-3.0, start=t0)

    def test_rejects_naive_start(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            SimulatedClock(step=timedelta(seconds=1), start=datetime(2021, 10, 2))

    def test_listeners_see_every_tick(self, t0):
        clock = SimulatedClock.from_seconds(3.0, start=t0)
        seen = []
        clock.subscribe(seen.append)
        clock.advance()
        clock.advance()
        assert seen == [t0 + timedelta(seconds=3), t0 + timedelta(seconds=6)]

    def test_failing_listener_does_not_break_advance(self, t0):
        clock = SimulatedClock.from_seconds(3.0, start=t0)
        seen = []
        clock.subscribe(lambda t: 1 / 0)
        clock.subscribe(seen.append)

        assert clock.advance() == t0 + timedelta(seconds=3)
        assert clock.ticks == 1
        assert seen == [t0 + timedelta(seconds=3)]
