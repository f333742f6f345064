# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import socketserver
import threading
from typing import Callable

import pytest

from lbcheck.config import ProbeSettings
from lbcheck.probe.connector import TcpConnector


class _EchoHandler(socketserver.StreamRequestHandler):
    def handle(self):
        for line in self.rfile:
            self.wfile.write(self.server.transform(line))


class _EchoServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True
    request_queue_size = 64

    def __init__(self, transform: Callable[[bytes], bytes]):
        self.transform = transform
        super().__init__(("127.0.0.1", 0), _EchoHandler)


@pytest.fixture
def echo_server_factory():
    servers = []

    def start(transform: Callable[[bytes], bytes] = lambda line: line) -> int:
        try:
            server = _EchoServer(transform)
        except PermissionError as exc:
            pytest.skip(f"Socket creation blocked in test environment: {exc}")
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append((server, thread))
        return server.server_address[1]

    yield start

    for server, thread in servers:
        server.shutdown()
        server.server_close()
        thread.join(timeout=1)


@pytest.fixture
def echo_port(echo_server_factory):
    return echo_server_factory()


@pytest.fixture
def refused_port():
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except PermissionError as exc:
        pytest.skip(f"Socket creation blocked in test environment: {exc}")
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def loopback_connector():
    return TcpConnector(ProbeSettings(host="127.0.0.1", connect_timeout=5.0, io_timeout=5.0))


class EchoStream:
    """In-memory duplex stream that answers each flushed frame through `transform`."""

    def __init__(self, transform: Callable[[bytes], bytes] = lambda frame: frame):
        self.transform = transform
        self.written = bytearray()
        self._pending = bytearray()
        self._readable = bytearray()
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.closed:
            raise ValueError("write to closed file")
        self._pending.extend(data)
        self.written.extend(data)
        return len(data)

    def flush(self) -> None:
        if self._pending:
            self._readable.extend(self.transform(bytes(self._pending)))
            self._pending.clear()

    def readline(self) -> bytes:
        idx = self._readable.find(b"\n")
        end = len(self._readable) if idx < 0 else idx + 1
        line = bytes(self._readable[:end])
        del self._readable[:end]
        return line

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, stream: EchoStream):
        self.stream = stream
        self.closed = False

    def makefile(self, mode):  # noqa: ARG002
        return self.stream

    def close(self) -> None:
        self.closed = True


class FakeConnector:
    """Counts dials; `refuse` decides per dial index whether to raise ConnectionRefusedError."""

    def __init__(self, transform: Callable[[bytes], bytes] = lambda frame: frame, refuse=lambda index: False):
        self.transform = transform
        self.refuse = refuse
        self.calls: list[int] = []
        self.connections: list[FakeConnection] = []
        self._lock = threading.Lock()

    def connect(self, port: int) -> FakeConnection:
        with self._lock:
            index = len(self.calls)
            self.calls.append(port)
            if self.refuse(index):
                raise ConnectionRefusedError(111, "Connection refused")
            conn = FakeConnection(EchoStream(self.transform))
            self.connections.append(conn)
            return conn


def no_newline_binary(size: int) -> bytes:
    return bytes(11 + (i % 200) for i in range(size))
