"""Shared test fixtures."""

import pytest

from pyaeon import Duration
from pyaeon.culture import GermanCulture, InvariantCulture


def make_sample() -> Duration:
    """One of every unit from years down to Planck time: 1, 2, ... 14."""
    return Duration.from_components(
        years=1,
        days=2,
        hours=3,
        minutes=4,
        seconds=5,
        milliseconds=6,
        microseconds=7,
        nanoseconds=8,
        picoseconds=9,
        femtoseconds=10,
        attoseconds=11,
        zeptoseconds=12,
        yoctoseconds=13,
        planck_time=14,
    )


@pytest.fixture
def sample():
    return make_sample()


@pytest.fixture
def invariant():
    return InvariantCulture()


@pytest.fixture
def german():
    return GermanCulture()
