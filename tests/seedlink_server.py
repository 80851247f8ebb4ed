# tests/seedlink_server.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Scripted loopback Seedlink server for session tests

import socket
import threading
import time

HELLO_REPLY = b"SeedLink v3.1 (2020.075)\r\nGEOFON\r\n"
CATALOG_REPLY = (
    b"IU RAND  United States\n"
    b"GE WLF   Walferdange, Luxembourg\n"
    b"NL HGN   Heimansgroeve, Netherlands\n"
    b"END"
)

def read_command(conn: socket.socket) -> bytes:
    """Read one CRLF-terminated command."""
    data = b""
    while not data.endswith(b"\r\n"):
        chunk = conn.recv(64)
        if not chunk:
            break
        data += chunk
    return data

def catalog_script(hello=HELLO_REPLY, catalog=CATALOG_REPLY, chunk_size=None, delay=0.0):
    """Standard HELLO/CAT server, optionally dribbling replies in small chunks."""
    def send(conn, payload):
        if not chunk_size:
            conn.sendall(payload)
            return
        for i in range(0, len(payload), chunk_size):
            conn.sendall(payload[i:i + chunk_size])
            time.sleep(delay)

    def script(conn, commands):
        commands.append(read_command(conn))
        send(conn, hello)
        commands.append(read_command(conn))
        send(conn, catalog)
        # Hold the connection until the client closes it
        conn.recv(64)
    return script

def silent_script(conn, commands):
    """Accept and never answer."""
    commands.append(read_command(conn))
    conn.recv(64)

class ScriptedSeedlinkServer:
    """
    TCP server on 127.0.0.1 running `script(conn, commands)` per connection.
    Records every received command and the number of accepted connections.
    """
    def __init__(self, script):
        self.script = script
        self.commands = []
        self.connections = 0
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.listen(5)
        self.port = self.sock.getsockname()[1]
        self.running = True
        self.thread = threading.Thread(target=self._accept_loop, daemon=True)
        self.thread.start()

    def _accept_loop(self):
        while self.running:
            try:
                conn, _ = self.sock.accept()
            except OSError:
                break
            self.connections += 1
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()

    def _handle(self, conn):
        try:
            self.script(conn, self.commands)
        except OSError:
            pass
        finally:
            conn.close()

    def stop(self):
        self.running = False
        self.sock.close()

def unused_port() -> int:
    """A loopback port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
