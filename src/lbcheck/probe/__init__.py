# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe engine: payloads, single-connection probe and batch patterns."""

from .batch import probe_fresh_connection, run_concurrent_batch, run_sequential_batch
from .connector import Connection, Connector, TcpConnector, create_default_connector, open_stream
from .payloads import ALPHABET, generate_binary, generate_text
from .prober import payloads_match, probe

__all__ = [
    "ALPHABET",
    "Connection",
    "Connector",
    "TcpConnector",
    "create_default_connector",
    "generate_binary",
    "generate_text",
    "open_stream",
    "payloads_match",
    "probe",
    "probe_fresh_connection",
    "run_concurrent_batch",
    "run_sequential_batch",
]
