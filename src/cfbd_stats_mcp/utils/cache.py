"""In-memory response cache for CFBD lookups.

This module provides a short-lived key/value store for reshaped fetch
results. Entries expire after a fixed TTL and are overwritten by later
successful fetches for the same key. There is no size bound and no
invalidation API; expired entries are simply ignored on read.

The cache is an explicit object passed to the fetcher rather than module
state, so each server (and each test) owns an isolated instance and can
supply its own clock.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from cfbd_stats_mcp.utils.constants import CACHE_TTL_SECONDS
from cfbd_stats_mcp.utils.enums import StatKind

logger = logging.getLogger(__name__)


def build_cache_key(
    kind: StatKind,
    team: str,
    year: int,
    sub_filter: str | None = None,
    has_filter: bool = False,
) -> str:
    """Build a deterministic cache key for a lookup.

    Args:
        kind: The statistic kind.
        team: The normalized team name.
        year: The resolved season year.
        sub_filter: Optional kind-specific filter value (category, position).
        has_filter: Whether this kind accepts a sub-filter at all. Kinds that
                    do get an "_all" suffix when no filter value is given.

    Returns:
        A key like "player_Oklahoma_2024_passing" or "roster_Texas_2023".
    """
    key = f"{kind}_{team}_{year}"
    if has_filter:
        key = f"{key}_{sub_filter or 'all'}"
    return key


class ResponseCache:
    """TTL cache mapping lookup signatures to previously computed results.

    Attributes:
        ttl_seconds: Age (in seconds) at which an entry stops being served.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache.

        Args:
            ttl_seconds: Entry lifetime. Defaults to 5 minutes.
            clock: Monotonic time source, injectable for tests.
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Retrieve a payload if it is present and younger than the TTL.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached payload, or None on a miss or an expired entry.
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache miss for key: {key}")
            return None

        payload, stored_at = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            logger.debug(f"Cache entry expired for key: {key}")
            return None

        logger.debug(f"Cache hit for key: {key}")
        return payload

    def put(self, key: str, payload: Any) -> None:
        """Store or overwrite a payload, stamped with the current time.

        Args:
            key: The cache key to store under.
            payload: The value to cache.
        """
        with self._lock:
            self._entries[key] = (payload, self._clock())
        logger.debug(f"Cached result: {key} (TTL: {self.ttl_seconds}s)")
