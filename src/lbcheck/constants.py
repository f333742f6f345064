# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire protocol and check-plan constants."""

DELIMITER = b"\n"

SHORT_TEXT_SIZE = 100
LONG_TEXT_SIZE = 65536
BINARY_SIZE = 200
BATCH_PAYLOAD_SIZE = 100

CONCURRENT_ATTEMPTS = 10
# One more than the threshold denominator; the extra attempt is headroom.
SEQUENTIAL_ATTEMPTS = 11
BATCH_PASS_THRESHOLD = 5

DEFAULT_CONFIG_PATH = "./config.json"
DEFAULT_HOST = "localhost"

ACTION_CONNECT = "connect"
ACTION_SHORT_TEXT = "short_text"
ACTION_LONG_TEXT = "long_text"
ACTION_BINARY = "binary"
ACTION_CONCURRENT_CONN = "concurrent_conn"
ACTION_SEQUENTIAL_CONN = "sequential_conn"
ACTION_CONCURRENT_BATCH = "concurrent_batch"
ACTION_SEQUENTIAL_BATCH = "sequential_batch"

__all__ = [
    "ACTION_BINARY",
    "ACTION_CONCURRENT_BATCH",
    "ACTION_CONCURRENT_CONN",
    "ACTION_CONNECT",
    "ACTION_LONG_TEXT",
    "ACTION_SEQUENTIAL_BATCH",
    "ACTION_SEQUENTIAL_CONN",
    "ACTION_SHORT_TEXT",
    "BATCH_PASS_THRESHOLD",
    "BATCH_PAYLOAD_SIZE",
    "BINARY_SIZE",
    "CONCURRENT_ATTEMPTS",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_HOST",
    "DELIMITER",
    "LONG_TEXT_SIZE",
    "SEQUENTIAL_ATTEMPTS",
    "SHORT_TEXT_SIZE",
]
