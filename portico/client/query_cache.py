"""
Query Cache

Keyed cache of server reads with a staleness window, a polling interval
and explicit invalidation.

Timing (defaults from settings):
================================
    stale after       8 s   → next get() refetches instead of serving the cache
    refetch interval 10 s   → poll() refetches every entry older than this

Invalidation marks entries stale and immediately refetches them, which is
how a successful form submission refreshes ``/api/network`` and
``/api/clusters``.

There is no background thread; the owner calls poll() from its own loop.
Failed background refetches are logged and keep the previous data.

Usage:
======
    cache = QueryCache()
    network = cache.get("/api/network", lambda: api.fetch("/api/network"))
    ...
    cache.invalidate("/api/network", "/api/clusters")
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import httpx

from portico.client.api_client import ApiError
from portico.config.settings import settings
from portico.shared.core.logging import get_logger

logger = get_logger("portico.client.cache")


NETWORK_QUERY = "/api/network"
CLUSTERS_QUERY = "/api/clusters"


@dataclass
class QueryEntry:
    """Cached result of one query key."""

    key: str
    fetcher: Callable[[], Any]
    data: Any = None
    updated_at: Optional[float] = None
    invalidated: bool = False
    fetch_count: int = 0
    error: Optional[Exception] = None


class QueryCache:
    """In-process cache of API reads."""

    def __init__(
        self,
        stale_seconds: Optional[float] = None,
        refetch_interval_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stale_seconds = settings.NETWORK_STALE_SECONDS if stale_seconds is None else stale_seconds
        self.refetch_interval_seconds = (
            settings.NETWORK_REFETCH_INTERVAL_SECONDS
            if refetch_interval_seconds is None
            else refetch_interval_seconds
        )
        self.clock = clock
        self._entries: Dict[str, QueryEntry] = {}

    def register(self, key: str, fetcher: Callable[[], Any], placeholder: Any = None) -> QueryEntry:
        """Declare a query; placeholder data is served until the first fetch."""
        entry = self._entries.get(key)
        if entry is None:
            entry = QueryEntry(key=key, fetcher=fetcher, data=placeholder)
            self._entries[key] = entry
        else:
            entry.fetcher = fetcher
        return entry

    def entry(self, key: str) -> Optional[QueryEntry]:
        return self._entries.get(key)

    def is_stale(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None or entry.invalidated or entry.updated_at is None:
            return True
        return self.clock() - entry.updated_at >= self.stale_seconds

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, key: str, fetcher: Optional[Callable[[], Any]] = None) -> Any:
        """
        Cached data for ``key``, refetched first when stale.

        Raises:
            KeyError: If the key was never registered and no fetcher is given
        """
        if fetcher is not None:
            self.register(key, fetcher)
        if key not in self._entries:
            raise KeyError(key)
        if self.is_stale(key):
            return self.refetch(key)
        return self._entries[key].data

    def refetch(self, key: str) -> Any:
        """Run the fetcher now; errors propagate and leave the old data in place."""
        entry = self._entries[key]
        try:
            data = entry.fetcher()
        except Exception as e:
            entry.error = e
            raise
        entry.data = data
        entry.updated_at = self.clock()
        entry.invalidated = False
        entry.error = None
        entry.fetch_count += 1
        return data

    # ═══════════════════════════════════════════════════════════════════════════
    # INVALIDATION / POLLING
    # ═══════════════════════════════════════════════════════════════════════════

    def invalidate(self, *keys: str, refetch: bool = True) -> List[str]:
        """
        Mark keys stale (all keys when none are given) and refetch them.

        Returns the keys that were refetched successfully.
        """
        targets = list(keys) or list(self._entries)
        refreshed = []
        for key in targets:
            entry = self._entries.get(key)
            if entry is None:
                continue
            entry.invalidated = True
            if refetch and self._safe_refetch(key):
                refreshed.append(key)
        return refreshed

    def due(self) -> List[str]:
        """Keys whose data is older than the refetch interval."""
        now = self.clock()
        return [
            key
            for key, entry in self._entries.items()
            if entry.updated_at is None or entry.invalidated or now - entry.updated_at >= self.refetch_interval_seconds
        ]

    def poll(self) -> List[str]:
        """Refetch every due key; returns the keys refreshed."""
        return [key for key in self.due() if self._safe_refetch(key)]

    def set_refetch_interval(self, seconds: float) -> None:
        self.refetch_interval_seconds = max(1.0, float(seconds))

    def _safe_refetch(self, key: str) -> bool:
        try:
            self.refetch(key)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Background refetch failed", key=key, error=str(e))
            return False
        return True
