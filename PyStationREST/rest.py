# PyStationREST/rest.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# FastAPI HTTP front end for the Seedlink station service
# GET /?host=host1:port1,host2 -> JSON list of query results

import os
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from seedlink_stations.cache import StationCache
from seedlink_stations.config import Config, load_config
from seedlink_stations.endpoint import parse_endpoints
from seedlink_stations.errors import SeedlinkStationsError, InvalidQuery
from seedlink_stations.orchestrator import QueryOrchestrator

logger = logging.getLogger('REST')

ALLOWED_PARAMETERS = ["host"]

def http_error(status: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status)

def validate_allowed(key: str):
    if key not in ALLOWED_PARAMETERS:
        raise InvalidQuery(f"Key {key} is not supported")

def create_app(config: Optional[Config] = None, orchestrator: Optional[QueryOrchestrator] = None) -> FastAPI:
    """Build the HTTP app around one process-wide cache and orchestrator."""
    config = config or Config()
    if orchestrator is None:
        orchestrator = QueryOrchestrator(
            cache=StationCache(ttl=config.ttl_seconds),
            timeout=config.timeout_seconds,
            max_workers=config.max_workers
        )

    app = FastAPI(
        title="Seedlink Station Service",
        description="Station catalogs of remote Seedlink servers",
        version="1.0.0"
    )
    app.state.config = config
    app.state.orchestrator = orchestrator

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET"
        return response

    @app.get("/{path:path}")
    def stations(path: str, request: Request):
        query = request.url.query
        params = request.query_params

        if not query:
            return http_error(400, "Empty query string submitted")

        if "host" not in params:
            return http_error(400, "Host parameter is required")

        # Only root path is supported
        if path != "":
            return http_error(405, "Method not supported")

        try:
            for key in params.keys():
                validate_allowed(key)
            endpoints = parse_endpoints(params["host"], config.default_seedlink_port)
        except SeedlinkStationsError as e:
            logger.info(f"[REST] Rejected query {query!r}: {e}")
            return http_error(400, str(e))

        results = orchestrator.query(endpoints)
        logger.info(f"[REST] Served {len(results)} servers for {request.client.host if request.client else '-'}")
        return JSONResponse([result.as_response() for result in results])

    return app

app = create_app(load_config(os.environ.get("SEEDLINK_STATIONS_CONFIG")))
