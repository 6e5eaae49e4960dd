"""TTL keyed cache with lazy expiry and an optional fetch strategy."""

from __future__ import annotations

import inspect
import logging
from dataclasses import replace
from typing import Any, Generic, TypeVar

from keyed_cache.errors import MissingFetchStrategy
from keyed_cache.infra.config import CacheOptions, Settings
from keyed_cache.infra.config import settings as default_settings
from keyed_cache.models.entry import Entry

logger = logging.getLogger("keyed-cache.cache")

K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C")

_MISSING: Any = object()


class Cache(Generic[K, V, C]):
    """Time-to-live cache over an insertion-ordered list of entries.

    Expiry is lazy: stale entries are dropped at the start of reads and
    fetches, never by a timer. Keys are matched with ``options.compare``
    by linear scan, first match wins.

    Not safe for concurrent structural mutation across threads. Concurrent
    ``fetch`` calls for the same missing key each run the fetch strategy;
    the last one to finish is the value that stays cached.
    """

    def __init__(self, options: CacheOptions | None = None, **overrides: Any) -> None:
        options = options or CacheOptions()
        if overrides:
            options = replace(options, **overrides)
        self.options = options
        self._entries: list[Entry[K, V]] = []

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> Cache:
        """Build a cache whose TTL comes from environment settings."""
        settings = settings or default_settings
        overrides.setdefault("ttl", settings.ttl)
        return cls(CacheOptions(), **overrides)

    # -- internals ---------------------------------------------------------

    def _now(self) -> float:
        return self.options.clock.now()

    def _find(self, key: K) -> int | None:
        compare = self.options.compare
        for index, entry in enumerate(self._entries):
            if compare(entry.key, key):
                return index
        return None

    def _tidy(self) -> None:
        now = self._now()
        live = [entry for entry in self._entries if not entry.is_stale(now)]
        pruned = len(self._entries) - len(live)
        if pruned:
            self._entries[:] = live
            logger.debug("Pruned %d expired cache entries", pruned)

    def _add(self, key: K, value: V) -> None:
        self._entries.append(Entry(key=key, value=value, expiry=self._now() + self.options.ttl))

    # -- public API --------------------------------------------------------

    def get(self, key: K, default: Any = None) -> V | Any:
        """Return the live value for ``key``, or ``default`` if there is none."""
        self._tidy()
        index = self._find(key)
        if index is None:
            return default
        return self._entries[index].value

    def contains(self, key: K) -> bool:
        self._tidy()
        return self.get(key, _MISSING) is not _MISSING

    def set(self, key: K, value: V) -> bool:
        """Insert or refresh ``key``.

        Returns True when a new entry was created, False when an existing one
        was overwritten and its expiry reset. Other stale entries are left for
        the next read to prune.
        """
        index = self._find(key)
        if index is not None:
            entry = self._entries[index]
            entry.value = value
            entry.expiry = self._now() + self.options.ttl
            return False
        self._add(key, value)
        return True

    def remove(self, key: K) -> bool:
        index = self._find(key)
        if index is None:
            return False
        del self._entries[index]
        return True

    async def fetch(self, key: K, context: C | None = None) -> V:
        """Return the cached value, computing and storing it on a miss.

        On a miss the configured fetch strategy is called with
        ``(key, context)``; its result may be a plain value or an awaitable.
        The entry's expiry is computed once the strategy has finished.
        Exceptions from the strategy propagate and nothing is stored.

        Raises:
            MissingFetchStrategy: on a miss when no fetch strategy is set.
        """
        self._tidy()
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value

        strategy = self.options.fetch
        if strategy is None:
            raise MissingFetchStrategy()

        logger.debug("Cache miss for %r, calling fetch strategy", key)
        value = strategy(key, context)
        if inspect.isawaitable(value):
            value = await value

        # Another fetch for the same key may have finished while this one
        # was suspended; overwrite it so one entry per key remains.
        self.set(key, value)
        return value

    def expired(self, key: K) -> bool:
        """True if an entry for ``key`` exists but is past its expiry."""
        index = self._find(key)
        if index is None:
            return False
        return self._entries[index].is_stale(self._now())

    def expire(self, key: K, at: float | None = None) -> bool:
        """Move the expiry of ``key`` to ``at`` (default: now).

        Returns False if there is no entry for ``key``.
        """
        index = self._find(key)
        if index is None:
            return False
        self._entries[index].expiry = self._now() if at is None else at
        return True

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        self._tidy()
        return len(self._entries)
