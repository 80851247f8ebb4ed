# seedlink_stations/orchestrator.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Query orchestration over many Seedlink servers
# Cache first, probe misses, store successes
# Results are returned in input order

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Callable, Sequence

from seedlink_stations.cache import StationCache
from seedlink_stations.endpoint import ServerEndpoint
from seedlink_stations.result import QueryResult
from seedlink_stations.session import SeedlinkSession, DEFAULT_TIMEOUT

logger = logging.getLogger('Orchestrator')

class QueryOrchestrator:
    """
    Resolve a list of endpoints to QueryResults.
    - max_workers == 1: one session at a time
    - max_workers > 1: distinct cache misses probed on a thread pool
    Each distinct key is probed at most once per call.
    """
    def __init__(
        self,
        cache: StationCache,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = 1,
        probe: Callable[[ServerEndpoint, float], QueryResult] = None
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.cache = cache
        self.timeout = timeout
        self.max_workers = max_workers
        self.probe = probe or self._run_session

    @staticmethod
    def _run_session(endpoint: ServerEndpoint, timeout: float) -> QueryResult:
        return SeedlinkSession(endpoint, timeout).run()

    def query(self, endpoints: Sequence[ServerEndpoint]) -> List[QueryResult]:
        start_time = time.time()
        resolved: Dict[str, QueryResult] = {}
        misses: List[ServerEndpoint] = []
        pending = set()

        for endpoint in endpoints:
            if endpoint.key in resolved or endpoint.key in pending:
                continue
            cached = self.cache.lookup(endpoint.key)
            if cached is not None:
                resolved[endpoint.key] = cached
            else:
                misses.append(endpoint)
                pending.add(endpoint.key)

        if self.max_workers == 1 or len(misses) <= 1:
            for endpoint in misses:
                resolved[endpoint.key] = self._probe_and_store(endpoint)
        else:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(misses))) as pool:
                fresh = pool.map(self._probe_and_store, misses)
                for endpoint, result in zip(misses, fresh):
                    resolved[endpoint.key] = result

        results = [resolved[endpoint.key] for endpoint in endpoints]

        duration = time.time() - start_time
        logger.info(f"[Orchestrator] Resolved {len(results)} endpoints "
                    f"({len(misses)} probed, {len(resolved) - len(misses)} cached) in {duration:.3f}s")
        return results

    def _probe_and_store(self, endpoint: ServerEndpoint) -> QueryResult:
        result = self.probe(endpoint, self.timeout)
        if result.error is None:
            self.cache.put(endpoint.key, result)
        return result
