# seedlink_stations/result.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Outcome of one Seedlink probe

import time
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from seedlink_stations.endpoint import ServerEndpoint
from seedlink_stations.catalog import StationRecord
from seedlink_stations.errors import ErrorKind


class QueryResult(BaseModel):
    """
    Result of probing one endpoint.
    error is None iff the handshake and catalog were fully parsed;
    stations is empty whenever error is set.
    connected records that at least one byte was received.
    """
    model_config = ConfigDict(frozen=True)

    endpoint: ServerEndpoint
    stations: List[StationRecord] = Field(default_factory=list)
    error: Optional[ErrorKind] = None
    protocol_version: Optional[str] = None
    server_identifier: Optional[str] = None
    connected: bool = False
    requested_at: float = Field(default_factory=time.time)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def age(self, now: Optional[float] = None) -> float:
        """Seconds since the probe started."""
        return (now if now is not None else time.time()) - self.requested_at

    def as_response(self) -> Dict[str, Any]:
        """JSON-ready dict in the shape served over HTTP."""
        return {
            "server": self.endpoint.key,
            "host": self.endpoint.host,
            "port": self.endpoint.port,
            "stations": [s.model_dump() for s in self.stations],
            "error": self.error.value if self.error else None,
            "version": self.protocol_version,
            "identifier": self.server_identifier,
            "connected": self.connected,
            "requested": int(self.requested_at * 1000),
        }
