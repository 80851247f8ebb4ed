# seedlink_stations/server.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Process entry point
# Serves the HTTP API with uvicorn, or probes servers once with --probe

import sys
import json
import logging
import argparse

from seedlink_stations.cache import StationCache
from seedlink_stations.config import Config, load_config
from seedlink_stations.endpoint import parse_endpoints
from seedlink_stations.errors import SeedlinkStationsError
from seedlink_stations.orchestrator import QueryOrchestrator

logger = logging.getLogger('Server')

def build_orchestrator(config: Config) -> QueryOrchestrator:
    return QueryOrchestrator(
        cache=StationCache(ttl=config.ttl_seconds),
        timeout=config.timeout_seconds,
        max_workers=config.max_workers
    )

def run_probe(config: Config, hosts: str) -> int:
    """Query the given servers once and print the JSON result."""
    try:
        endpoints = parse_endpoints(hosts, config.default_seedlink_port)
    except SeedlinkStationsError as e:
        logger.error(f"[Server] {e}")
        return 2

    results = build_orchestrator(config).query(endpoints)
    print(json.dumps([result.as_response() for result in results], indent=2))
    return 0 if all(result.error is None for result in results) else 1

def serve(config: Config):
    import uvicorn
    from PyStationREST.rest import create_app

    app = create_app(config, build_orchestrator(config))
    logger.info(f"[Server] Seedlink station server initialized on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seedlink station catalog service")
    parser.add_argument("-c", "--config", default="config.yaml", help="Config file path")
    parser.add_argument("--probe", metavar="HOSTS", help="Comma-separated host[:port] list to query once")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    if args.probe:
        return run_probe(config, args.probe)

    try:
        serve(config)
    except KeyboardInterrupt:
        logger.info("[Server] Interrupted by user")
    return 0

if __name__ == "__main__":
    sys.exit(main())
