"""keyed-cache: a small time-to-live cache with pluggable clock, key comparison and fetch."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from keyed_cache.cache import Cache
from keyed_cache.errors import CacheError, ConfigurationError, MissingFetchStrategy
from keyed_cache.infra.clock import Clock, ManualClock, SystemClock
from keyed_cache.infra.config import CacheOptions, Settings, same_key
from keyed_cache.models.entry import Entry

try:
    __version__ = version("keyed-cache")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Cache",
    "CacheError",
    "CacheOptions",
    "Clock",
    "ConfigurationError",
    "Entry",
    "ManualClock",
    "MissingFetchStrategy",
    "Settings",
    "SystemClock",
    "same_key",
]
