# seedlink_stations/errors.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Error taxonomy
# Input validation errors are raised; probe failures are recorded on results

from enum import Enum


class ErrorKind(str, Enum):
    """Probe failure recorded on a QueryResult (never raised)."""
    ECONNREFUSED = "ECONNREFUSED"
    CATNOTIMPLEMENTED = "CATNOTIMPLEMENTED"


class SeedlinkStationsError(Exception):
    """Base class for errors raised to the caller."""


class InvalidPort(SeedlinkStationsError, ValueError):
    """Resolved port is outside 0..65535."""
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"A submitted port is invalid: {token}")


class InvalidQuery(SeedlinkStationsError, ValueError):
    """Malformed query parameters."""
