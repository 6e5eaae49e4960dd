"""Cache configuration: per-instance options and environment settings."""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from keyed_cache.infra.clock import Clock, SystemClock

FetchStrategy = Callable[[Any, Any], "Awaitable[Any] | Any"]
CompareStrategy = Callable[[Any, Any], bool]


def same_key(a: Any, b: Any) -> bool:
    """Default key comparison: identity, or equality for value types."""
    return a is b or a == b


@dataclass(frozen=True)
class CacheOptions:
    """Options for a single Cache instance. Immutable once built."""

    clock: Clock = field(default_factory=SystemClock)
    ttl: float = math.inf  # milliseconds
    fetch: FetchStrategy | None = None
    compare: CompareStrategy = same_key


class Settings(BaseSettings):
    # Default time-to-live in milliseconds; "inf" means entries never expire.
    ttl: float = Field(default=math.inf, ge=0)

    model_config = {
        "env_prefix": "KEYED_CACHE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
