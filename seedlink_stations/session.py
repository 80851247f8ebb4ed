# seedlink_stations/session.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Seedlink HELLO/CAT protocol session
# Transport-independent exchange state machine plus blocking socket driver
# Exactly one terminal outcome per session, socket closed on every path

import time
import logging
from enum import Enum
from typing import Optional, Callable, List

from PySeedLink.seedlink import (
    SeedLinkConnection,
    CRNL,
    HELLO_COMMAND,
    CAT_COMMAND,
    CAT_NOT_IMPLEMENTED,
)
from seedlink_stations.catalog import StationRecord, parse_catalog, END_MARKER
from seedlink_stations.endpoint import ServerEndpoint
from seedlink_stations.errors import ErrorKind
from seedlink_stations.result import QueryResult

logger = logging.getLogger('Session')

DEFAULT_TIMEOUT = 5.0  # seconds

class ExchangeState(Enum):
    CONNECTING = "connecting"
    AWAITING_HELLO = "awaiting_hello"
    AWAITING_CATALOG = "awaiting_catalog"
    DONE = "done"

class ExchangeEvent(Enum):
    NONE = "none"
    SEND_CAT = "send_cat"
    CATALOG_COMPLETE = "catalog_complete"
    CAT_NOT_IMPLEMENTED = "cat_not_implemented"
    FAILED = "failed"

class CatalogExchange:
    """
    HELLO -> CAT exchange driven purely by received bytes.

    - HELLO reply is complete when the buffer splits on CRLF into exactly
      three parts (version, identifier, trailing empty segment)
    - CAT reply is complete when the buffer ends with "\\nEND", or fails
      when it equals the "CAT command not implemented" line
    """
    def __init__(self):
        self.state = ExchangeState.CONNECTING
        self.buffer = b""
        self.protocol_version: Optional[str] = None
        self.server_identifier: Optional[str] = None
        self.stations: List[StationRecord] = []
        self.error: Optional[ErrorKind] = None

    @property
    def done(self) -> bool:
        return self.state is ExchangeState.DONE

    def start(self) -> bytes:
        """Connection is up: move to AWAITING_HELLO and return the command to send."""
        if self.state is not ExchangeState.CONNECTING:
            raise RuntimeError(f"Exchange already started (state {self.state.value})")
        self.state = ExchangeState.AWAITING_HELLO
        return HELLO_COMMAND

    def feed(self, data: bytes) -> ExchangeEvent:
        """Append a received chunk and advance the state machine."""
        if self.state is ExchangeState.DONE:
            return ExchangeEvent.NONE
        if self.state is ExchangeState.CONNECTING:
            raise RuntimeError("Data received before exchange was started")

        self.buffer += data
        text = self.buffer.decode("utf-8", errors="replace")

        if self.state is ExchangeState.AWAITING_HELLO:
            parts = text.split(CRNL)
            if len(parts) != 3:
                return ExchangeEvent.NONE
            self.protocol_version, self.server_identifier = parts[0], parts[1]
            self.buffer = b""
            self.state = ExchangeState.AWAITING_CATALOG
            return ExchangeEvent.SEND_CAT

        # AWAITING_CATALOG
        if text == CAT_NOT_IMPLEMENTED:
            self.error = ErrorKind.CATNOTIMPLEMENTED
            self.state = ExchangeState.DONE
            return ExchangeEvent.CAT_NOT_IMPLEMENTED

        if self.buffer.endswith(END_MARKER):
            self.stations = parse_catalog(self.buffer)
            self.state = ExchangeState.DONE
            return ExchangeEvent.CATALOG_COMPLETE

        return ExchangeEvent.NONE

    def fail(self, error: ErrorKind = ErrorKind.ECONNREFUSED) -> ExchangeEvent:
        """Terminate from any non-terminal state (timeout, socket error, refusal)."""
        if self.state is ExchangeState.DONE:
            return ExchangeEvent.NONE
        self.error = error
        self.stations = []
        self.state = ExchangeState.DONE
        return ExchangeEvent.FAILED

class SeedlinkSession:
    """
    Probe one Seedlink server and produce a QueryResult.
    `timeout` (seconds) is a single idle timer over connect and every read.
    """
    def __init__(
        self,
        endpoint: ServerEndpoint,
        timeout: float = DEFAULT_TIMEOUT,
        connection_factory: Callable[..., SeedLinkConnection] = SeedLinkConnection,
        on_complete: Optional[Callable[[QueryResult], None]] = None
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.connection_factory = connection_factory
        self.on_complete = on_complete
        self.exchange = CatalogExchange()

    def run(self) -> QueryResult:
        requested_at = time.time()
        connected = False
        connection = self.connection_factory(self.endpoint.host, self.endpoint.port, self.timeout)

        logger.info(f"[Session] Probing {self.endpoint.key}")
        try:
            connection.connect()
            connection.send_command(self.exchange.start())

            while not self.exchange.done:
                data = connection.receive()
                connected = True
                event = self.exchange.feed(data)
                if event is ExchangeEvent.SEND_CAT:
                    logger.debug(f"[Session] {self.endpoint.key} is {self.exchange.protocol_version!r}, requesting catalog")
                    connection.send_command(CAT_COMMAND)

        # ValueError covers host names the resolver cannot encode (IDNA, embedded NUL)
        except (OSError, ValueError) as e:
            logger.warning(f"[Session] {self.endpoint.key} unreachable: {e}")
            self.exchange.fail(ErrorKind.ECONNREFUSED)
        finally:
            connection.close()

        error = self.exchange.error
        result = QueryResult(
            endpoint=self.endpoint,
            stations=list(self.exchange.stations) if error is None else [],
            error=error,
            protocol_version=self.exchange.protocol_version,
            server_identifier=self.exchange.server_identifier,
            connected=connected,
            requested_at=requested_at
        )

        duration = time.time() - requested_at
        if result.error is None:
            logger.info(f"[Session] {self.endpoint.key} returned {len(result.stations)} stations in {duration:.3f}s")
        else:
            logger.info(f"[Session] {self.endpoint.key} failed with {result.error.value} after {duration:.3f}s")

        if self.on_complete:
            self.on_complete(result)
        return result

def probe(endpoint: ServerEndpoint, timeout: float = DEFAULT_TIMEOUT) -> QueryResult:
    """Run one session to completion."""
    return SeedlinkSession(endpoint, timeout).run()
