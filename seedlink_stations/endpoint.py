# seedlink_stations/endpoint.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Seedlink server endpoint parsing
# "host" or "host:port" tokens, default port 18000
# Pure syntactic normalization - no DNS lookup

import re
from typing import List
from pydantic import BaseModel, ConfigDict, computed_field

from seedlink_stations.errors import InvalidPort, InvalidQuery

SEEDLINK_DEFAULT_PORT = 18000
MAX_PORT = 65536

# Plain ASCII digits only; "+80", "1_000" and " 80" fall back to the default
PORT_PATTERN = re.compile(r"-?[0-9]+")


class ServerEndpoint(BaseModel):
    """One Seedlink server. Immutable; `key` is the canonical host:port."""
    model_config = ConfigDict(frozen=True)

    host: str
    port: int = SEEDLINK_DEFAULT_PORT

    @computed_field
    @property
    def key(self) -> str:
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.key


def parse_endpoint(token: str, default_port: int = SEEDLINK_DEFAULT_PORT) -> ServerEndpoint:
    """
    Parse a "host[:port]" token.
    A missing or non-integer port falls back to `default_port`.
    Range checking is left to validate_endpoint().
    """
    parts = token.strip().split(":")
    host = parts[0]
    port = default_port
    if len(parts) > 1 and PORT_PATTERN.fullmatch(parts[1]):
        port = int(parts[1])
    return ServerEndpoint(host=host, port=port)


def validate_endpoint(endpoint: ServerEndpoint, token: str = None) -> ServerEndpoint:
    """Raise InvalidPort unless 0 <= port < 65536."""
    if not isinstance(endpoint.port, int) or endpoint.port < 0 or endpoint.port >= MAX_PORT:
        raise InvalidPort(token if token is not None else endpoint.key)
    return endpoint


def parse_endpoints(host_param: str, default_port: int = SEEDLINK_DEFAULT_PORT) -> List[ServerEndpoint]:
    """Parse and validate a comma-delimited list of host tokens, keeping input order."""
    if host_param is None or not host_param.strip():
        raise InvalidQuery("Host parameter is required")

    endpoints = []
    for token in host_param.split(","):
        endpoint = parse_endpoint(token, default_port)
        endpoints.append(validate_endpoint(endpoint, token))
    return endpoints
