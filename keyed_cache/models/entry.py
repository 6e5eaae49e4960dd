"""Cache entry record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Entry(Generic[K, V]):
    key: K
    value: V
    expiry: float  # absolute instant, same unit as Clock.now()

    def is_stale(self, now: float) -> bool:
        return self.expiry <= now
