# seedlink_stations/__init__.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Seedlink Station Service Core Package

__version__ = "1.0.0"
__date__ = "2026-10-19"
__author__ = "Kris Kirby, KE4AHR"
__license__ = "GNU General Public License v3.0"

"""
Station catalogs of remote Seedlink servers.

Features:
- host[:port] endpoint parsing with default port 18000
- HELLO/CAT exchange over TCP with a single idle timeout
- Fixed-column catalog parsing (network, station, site)
- Time-bounded cache of successful probes
- Sequential or thread-pool orchestration, results in input order
- FastAPI HTTP front end and YAML configuration
"""

# Import key classes for easier access
from .endpoint import ServerEndpoint, parse_endpoint, parse_endpoints, validate_endpoint
from .catalog import StationRecord, parse_station_line
from .result import QueryResult
from .errors import ErrorKind, InvalidPort, InvalidQuery, SeedlinkStationsError
from .session import SeedlinkSession, CatalogExchange, probe
from .cache import StationCache
from .orchestrator import QueryOrchestrator
from .config import Config, load_config

__all__ = [
    "ServerEndpoint",
    "parse_endpoint",
    "parse_endpoints",
    "validate_endpoint",
    "StationRecord",
    "parse_station_line",
    "QueryResult",
    "ErrorKind",
    "InvalidPort",
    "InvalidQuery",
    "SeedlinkStationsError",
    "SeedlinkSession",
    "CatalogExchange",
    "probe",
    "StationCache",
    "QueryOrchestrator",
    "Config",
    "load_config",
    "__version__",
]
