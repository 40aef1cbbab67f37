from datetime import datetime, timezone

import pytest

from orbit_tracker.core.tle import EXAMPLE_ISS_TLE, EXAMPLE_STARLINK_TLE, parse_tle_lines


@pytest.fixture
def iss_elements():
    (_name, elements), = parse_tle_lines(EXAMPLE_ISS_TLE.splitlines())
    return elements


@pytest.fixture
def starlink_elements():
    (_name, elements), = parse_tle_lines(EXAMPLE_STARLINK_TLE.splitlines())
    return elements


@pytest.fixture
def t0():
    # Shortly before the example TLE epochs (2021 day 275)
    return datetime(2021, 10, 2, 12, 0, 0, tzinfo=timezone.utc)
