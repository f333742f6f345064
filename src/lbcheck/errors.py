# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum


class LbCheckError(Exception):
    """Base class for lbcheck errors."""


class ConfigError(LbCheckError):
    """Application configuration is unreadable, malformed or empty."""


class InvalidArgument(LbCheckError, ValueError):
    """A caller passed an argument outside the accepted domain."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    MISMATCH = "MISMATCH"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class ProtocolError(LbCheckError):
    """The peer closed the stream before sending a complete frame."""


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map socket/stream exceptions to ErrorCategory.
    """
    if isinstance(exc, ProtocolError):
        return ErrorCategory.PROTOCOL_ERROR

    # socket.timeout is an alias of TimeoutError on current interpreters.
    if isinstance(exc, (TimeoutError, socket.timeout)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, BrokenPipeError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, OSError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "Host name resolution failure",
        ErrorCategory.PROTOCOL_ERROR: "Stream ended before the frame delimiter",
        ErrorCategory.MISMATCH: "Echoed payload differs from the request",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


__all__ = [
    "ConfigError",
    "ErrorCategory",
    "InvalidArgument",
    "LbCheckError",
    "ProtocolError",
    "categorize_exception",
    "error_category_to_reason",
]
