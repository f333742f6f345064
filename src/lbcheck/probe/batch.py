# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fresh-connection batch patterns run against one port."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait

from ..constants import (
    ACTION_CONCURRENT_CONN,
    ACTION_SEQUENTIAL_CONN,
    BATCH_PAYLOAD_SIZE,
    CONCURRENT_ATTEMPTS,
    SEQUENTIAL_ATTEMPTS,
)
from ..models.probe import BatchPattern, BatchResult
from ..utils.context import ProbeContext
from .connector import Connector, open_stream
from .payloads import generate_text
from .prober import probe


def probe_fresh_connection(port: int, connector: Connector, label: str, context: ProbeContext) -> bool:
    """Dial, run one text probe and close. Dial failures count as a failed attempt."""
    try:
        conn = connector.connect(port)
    except OSError as exc:
        context.logger.warning("FAIL: %s, reason: %s", label, exc)
        return False

    with open_stream(conn) as stream:
        payload = generate_text(BATCH_PAYLOAD_SIZE).encode("ascii")
        return probe(label, payload, stream, context=context).success


def run_sequential_batch(
    port: int,
    connector: Connector,
    *,
    context: ProbeContext | None = None,
    attempts: int = SEQUENTIAL_ATTEMPTS,
) -> BatchResult:
    """
    Open one connection at a time, `attempts` times in a row.

    Every attempt runs regardless of earlier failures.
    """
    context = context or ProbeContext(port=port)
    succeeded = 0
    for _ in range(attempts):
        if probe_fresh_connection(port, connector, ACTION_SEQUENTIAL_CONN, context):
            succeeded += 1

    context.logger.info("%s: %d/%d succeeded", BatchPattern.SEQUENTIAL.value, succeeded, attempts)
    return BatchResult(pattern=BatchPattern.SEQUENTIAL, attempted=attempts, succeeded=succeeded)


def run_concurrent_batch(
    port: int,
    connector: Connector,
    *,
    context: ProbeContext | None = None,
    attempts: int = CONCURRENT_ATTEMPTS,
) -> BatchResult:
    """
    Launch `attempts` tasks at once, each on its own connection, and wait for all of them.

    There is no cancellation: every task runs to completion before the tally.
    """
    context = context or ProbeContext(port=port)
    with ThreadPoolExecutor(max_workers=max(attempts, 1), thread_name_prefix="lbcheck-conn") as pool:
        futures = [
            pool.submit(probe_fresh_connection, port, connector, ACTION_CONCURRENT_CONN, context)
            for _ in range(attempts)
        ]
        wait(futures)

    succeeded = sum(1 for future in futures if future.result())
    context.logger.info("%s: %d/%d succeeded", BatchPattern.CONCURRENT.value, succeeded, attempts)
    return BatchResult(pattern=BatchPattern.CONCURRENT, attempted=attempts, succeeded=succeeded)


__all__ = ["probe_fresh_connection", "run_concurrent_batch", "run_sequential_batch"]
