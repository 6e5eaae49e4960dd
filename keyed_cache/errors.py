"""Errors raised by the cache itself.

Failures coming out of a caller-supplied fetch strategy are not part of this
hierarchy; they reach the caller of ``Cache.fetch`` unchanged.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for errors raised by keyed_cache."""


class ConfigurationError(CacheError):
    """The cache was asked to do something its options do not support."""


class MissingFetchStrategy(ConfigurationError):
    """``Cache.fetch`` was called on a cache built without a fetch strategy."""

    def __init__(self) -> None:
        super().__init__(
            "Cache.fetch called but no fetch strategy was configured; "
            "pass fetch=... when constructing the cache"
        )
