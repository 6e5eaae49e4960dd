"""Shared test fixtures."""

import pytest

from keyed_cache import Cache, ManualClock

T0 = 1_700_000_000_000


@pytest.fixture
def clock():
    return ManualClock(start=T0)


@pytest.fixture
def cache(clock):
    """A cache on a manual clock with a one-second TTL."""
    return Cache(clock=clock, ttl=1_000)
