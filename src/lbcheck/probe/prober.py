# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single write/read/compare cycle over an open stream."""

from __future__ import annotations

from typing import BinaryIO

from ..constants import DELIMITER
from ..errors import ErrorCategory, ProtocolError, categorize_exception, error_category_to_reason
from ..models.probe import ProbeOutcome
from ..utils.context import ProbeContext

_PREVIEW_BYTES = 32


def _preview(data: bytes) -> str:
    if len(data) <= _PREVIEW_BYTES:
        return repr(data)
    return f"{data[:_PREVIEW_BYTES]!r}... ({len(data)} bytes)"


def write_frame(stream: BinaryIO, payload: bytes) -> None:
    stream.write(payload)
    stream.write(DELIMITER)
    stream.flush()


def read_frame(stream: BinaryIO) -> bytes:
    """Read through the next delimiter and return the frame without it."""
    line = stream.readline()
    if not line.endswith(DELIMITER):
        raise ProtocolError(f"stream closed after {len(line)} bytes without a delimiter")
    return line[: -len(DELIMITER)]


def payloads_match(sent: bytes, received: bytes) -> bool:
    """ASCII case-insensitive equality; every other byte must match exactly."""
    return sent.lower() == received.lower()


def probe(label: str, payload: bytes, stream: BinaryIO, *, context: ProbeContext | None = None) -> ProbeOutcome:
    """
    Send `payload` as one frame, read one frame back and compare.

    Transport failures are reported as a failed outcome, never raised.
    """
    log = (context or ProbeContext()).logger
    try:
        write_frame(stream, payload)
        response = read_frame(stream)
    except (OSError, ValueError, ProtocolError) as exc:
        category = categorize_exception(exc)
        reason = str(exc) or error_category_to_reason(category)
        log.warning("> FAIL: %s, reason: %s", label, reason)
        return ProbeOutcome(label=label, success=False, error_category=category, reason=reason)

    if not payloads_match(payload, response):
        reason = f"expected={_preview(payload)} != actual={_preview(response)}"
        log.warning("> FAIL: %s, reason: %s", label, reason)
        return ProbeOutcome(label=label, success=False, error_category=ErrorCategory.MISMATCH, reason=reason)

    log.info("> OK: %s", label)
    return ProbeOutcome(label=label, success=True)


__all__ = ["payloads_match", "probe", "read_frame", "write_frame"]
