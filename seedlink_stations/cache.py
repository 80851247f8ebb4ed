# seedlink_stations/cache.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Time-bounded station cache
# Only successful results are stored; expiry is checked lazily at lookup

import time
import logging
import threading
from typing import Dict, Optional, Callable

from seedlink_stations.result import QueryResult

logger = logging.getLogger('StationCache')

DEFAULT_TTL = 300.0  # seconds

class StationCache:
    """
    Maps endpoint key -> most recent successful QueryResult.
    An entry is served while now - requested_at < ttl. Expired entries
    are ignored, never removed; put() overwrites.
    """
    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self.clock = clock
        self.entries: Dict[str, QueryResult] = {}
        self.lock = threading.RLock()

    def lookup(self, key: str) -> Optional[QueryResult]:
        with self.lock:
            entry = self.entries.get(key)
            if entry is None:
                return None
            if self.clock() - entry.requested_at >= self.ttl:
                logger.debug(f"[StationCache] Entry for {key} expired")
                return None
            logger.debug(f"[StationCache] Hit for {key}")
            return entry

    def put(self, key: str, result: QueryResult):
        if result.error is not None:
            raise ValueError(f"Refusing to cache failed result for {key}: {result.error.value}")
        with self.lock:
            self.entries[key] = result
        logger.debug(f"[StationCache] Stored {len(result.stations)} stations for {key}")

    def __contains__(self, key: str) -> bool:
        with self.lock:
            return key in self.entries

    def __len__(self) -> int:
        with self.lock:
            return len(self.entries)
