# tests/test_full_stack.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# End-to-end: orchestrator -> real sessions -> loopback Seedlink servers

import time
import pytest

from seedlink_stations.cache import StationCache
from seedlink_stations.endpoint import parse_endpoints
from seedlink_stations.errors import ErrorKind
from seedlink_stations.orchestrator import QueryOrchestrator
from tests.seedlink_server import ScriptedSeedlinkServer, catalog_script, unused_port

@pytest.fixture
def seedlink_servers():
    servers = [ScriptedSeedlinkServer(catalog_script()) for _ in range(2)]
    yield servers
    for srv in servers:
        srv.stop()

def test_second_query_served_from_cache(seedlink_servers):
    srv = seedlink_servers[0]
    orchestrator = QueryOrchestrator(StationCache(ttl=60.0), timeout=2.0)
    endpoints = parse_endpoints(f"127.0.0.1:{srv.port}")

    first = orchestrator.query(endpoints)
    second = orchestrator.query(endpoints)

    assert first[0].error is None
    assert len(first[0].stations) == 3
    assert second[0] is first[0]
    assert srv.connections == 1

def test_expired_cache_reprobes(seedlink_servers):
    srv = seedlink_servers[0]
    orchestrator = QueryOrchestrator(StationCache(ttl=0.2), timeout=2.0)
    endpoints = parse_endpoints(f"127.0.0.1:{srv.port}")

    orchestrator.query(endpoints)
    time.sleep(0.3)
    orchestrator.query(endpoints)

    assert srv.connections == 2

def test_failing_server_retried_every_request():
    port = unused_port()
    cache = StationCache(ttl=60.0)
    orchestrator = QueryOrchestrator(cache, timeout=1.0)
    endpoints = parse_endpoints(f"127.0.0.1:{port}")

    for _ in range(2):
        result = orchestrator.query(endpoints)[0]
        assert result.error is ErrorKind.ECONNREFUSED
        assert result.connected is False

    assert len(cache) == 0

@pytest.mark.parametrize("max_workers", [1, 4])
def test_many_servers(seedlink_servers, max_workers):
    down = unused_port()
    hosts = ",".join([
        f"127.0.0.1:{seedlink_servers[0].port}",
        f"127.0.0.1:{down}",
        f"127.0.0.1:{seedlink_servers[1].port}",
    ])
    orchestrator = QueryOrchestrator(StationCache(ttl=60.0), timeout=1.0, max_workers=max_workers)

    results = orchestrator.query(parse_endpoints(hosts))

    assert [r.endpoint.port for r in results] == [seedlink_servers[0].port, down, seedlink_servers[1].port]
    assert [r.error for r in results] == [None, ErrorKind.ECONNREFUSED, None]

def test_bad_host_name_does_not_abort_siblings(seedlink_servers):
    good = f"127.0.0.1:{seedlink_servers[0].port}"
    orchestrator = QueryOrchestrator(StationCache(ttl=60.0), timeout=1.0)

    results = orchestrator.query(parse_endpoints(f"{good},foo..bar"))

    assert [r.endpoint.key for r in results] == [good, "foo..bar:18000"]
    assert results[0].error is None
    assert len(results[0].stations) == 3
    assert results[1].error is ErrorKind.ECONNREFUSED
