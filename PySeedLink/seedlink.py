# PySeedLink/seedlink.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Seedlink TCP client transport
# Line-oriented ASCII commands, raw byte receive with idle timeout

import time
import socket
import threading
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as LookupTimeout
from typing import Optional

logger = logging.getLogger('SeedLink')

CRNL = "\r\n"
HELLO_COMMAND = ("HELLO" + CRNL).encode("ascii")
CAT_COMMAND = ("CAT" + CRNL).encode("ascii")
CAT_NOT_IMPLEMENTED = "CAT command not implemented" + CRNL

RECV_SIZE = 4096

# getaddrinfo cannot be interrupted, so lookups run here under a deadline
_resolver = ThreadPoolExecutor(max_workers=8, thread_name_prefix="seedlink-resolve")

class SeedLinkConnection:
    """
    Plain TCP connection to a Seedlink server.
    One timeout covers connect and every receive, so it behaves as an
    idle timer for the whole exchange. Errors propagate as OSError.
    """
    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.sock: Optional[socket.socket] = None
        self.lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self.sock is not None

    def connect(self):
        """
        Resolve and open the TCP connection within one timeout.
        Raises OSError on refusal or timeout, ValueError for unencodable host names.
        """
        deadline = time.monotonic() + self.timeout
        addresses = self._resolve(deadline)

        last_error: Optional[OSError] = None
        for family, socktype, proto, _, sockaddr in addresses:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"Connect to {self.host}:{self.port} timed out")
            sock = socket.socket(family, socktype, proto)
            sock.settimeout(remaining)
            try:
                sock.connect(sockaddr)
            except OSError as e:
                sock.close()
                last_error = e
                continue
            sock.settimeout(self.timeout)
            self.sock = sock
            logger.debug(f"[SeedLink] Connected to {self.host}:{self.port}")
            return

        raise last_error or OSError(f"No addresses for {self.host}:{self.port}")

    def _resolve(self, deadline: float):
        lookup = _resolver.submit(socket.getaddrinfo, self.host, self.port, 0, socket.SOCK_STREAM)
        try:
            return lookup.result(timeout=max(deadline - time.monotonic(), 0))
        except LookupTimeout:
            lookup.cancel()
            raise TimeoutError(f"Name lookup for {self.host} timed out")

    def send_command(self, command: bytes):
        with self.lock:
            if not self.sock:
                raise ConnectionError(f"Not connected to {self.host}:{self.port}")
            self.sock.sendall(command)
        logger.debug(f"[SeedLink] Sent {command.strip().decode('ascii', errors='replace')} to {self.host}:{self.port}")

    def receive(self) -> bytes:
        """Block for the next chunk. Remote close is reported as ConnectionResetError."""
        if not self.sock:
            raise ConnectionError(f"Not connected to {self.host}:{self.port}")
        data = self.sock.recv(RECV_SIZE)
        if not data:
            raise ConnectionResetError(f"Connection closed by {self.host}:{self.port}")
        logger.debug(f"[SeedLink] Received {len(data)} bytes from {self.host}:{self.port}")
        return data

    def close(self):
        """Close connection. Safe to call more than once."""
        with self.lock:
            if self.sock:
                try:
                    self.sock.close()
                finally:
                    self.sock = None
                logger.debug(f"[SeedLink] Disconnected from {self.host}:{self.port}")

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
