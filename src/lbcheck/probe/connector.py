# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Connection abstraction and the default TCP dialer."""

from __future__ import annotations

import socket
from contextlib import contextmanager, suppress
from typing import BinaryIO, Iterator, Protocol

from ..config import ProbeSettings, load_probe_settings


class Connection(Protocol):
    """The slice of the socket API the probe engine relies on."""

    def makefile(self, mode: str) -> BinaryIO: ...

    def close(self) -> None: ...


class Connector(Protocol):
    """Dials a fresh connection to a port. Raises OSError on failure."""

    def connect(self, port: int) -> Connection: ...


class TcpConnector:
    def __init__(self, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()

    def connect(self, port: int) -> socket.socket:
        sock = socket.create_connection((self.settings.host, port), timeout=self.settings.connect_timeout)
        sock.settimeout(self.settings.io_timeout)
        return sock


@contextmanager
def open_stream(conn: Connection) -> Iterator[BinaryIO]:
    """Wrap a connection in a buffered duplex stream; both are closed on exit."""
    stream = conn.makefile("rwb")
    try:
        yield stream
    finally:
        # Close errors on an already dead peer are ignored.
        with suppress(OSError, ValueError):
            stream.close()
        with suppress(OSError):
            conn.close()


def create_default_connector(settings: ProbeSettings | None = None) -> Connector:
    """Factory for the default socket-backed connector."""
    return TcpConnector(settings or load_probe_settings())


__all__ = ["Connection", "Connector", "TcpConnector", "create_default_connector", "open_stream"]
