# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Ordered, fail-fast check sequence for a single port."""

from __future__ import annotations

from typing import Callable

from ..constants import BATCH_PASS_THRESHOLD, BINARY_SIZE, LONG_TEXT_SIZE, SHORT_TEXT_SIZE
from ..models.report import PortCheck, PortVerdict
from ..probe.batch import run_concurrent_batch, run_sequential_batch
from ..probe.connector import Connector, create_default_connector, open_stream
from ..probe.payloads import generate_binary, generate_text
from ..probe.prober import probe
from ..utils.context import ProbeContext


def _text(size: int) -> Callable[[], bytes]:
    return lambda: generate_text(size).encode("ascii")


def _binary(size: int) -> Callable[[], bytes]:
    return lambda: generate_binary(size)


class PortValidator:
    """
    Runs connect -> short text -> long text -> binary -> concurrent batch -> sequential batch.

    The three single-shot probes share the connection opened by the connect
    step, which is closed before the batches start. Each batch dials its own
    connections. The first failing check decides the verdict and nothing after
    it runs.
    """

    def __init__(self, connector: Connector | None = None, *, threshold: int = BATCH_PASS_THRESHOLD):
        self.connector = connector or create_default_connector()
        self.threshold = threshold

    def validate(self, port: int, context: ProbeContext | None = None) -> PortVerdict:
        context = (context or ProbeContext()).for_port(port)
        log = context.logger
        verdict = PortVerdict(port=port, passed=False)

        try:
            conn = self.connector.connect(port)
        except OSError as exc:
            log.warning("FAIL: failed to establish connection on port, reason %s", exc)
            return self._fail(verdict, PortCheck.CONNECT, str(exc))
        log.info("> OK: %s", PortCheck.CONNECT.value)

        single_shot = (
            (PortCheck.SHORT_TEXT, _text(SHORT_TEXT_SIZE)),
            (PortCheck.LONG_TEXT, _text(LONG_TEXT_SIZE)),
            (PortCheck.BINARY, _binary(BINARY_SIZE)),
        )
        with open_stream(conn) as stream:
            for check, make_payload in single_shot:
                outcome = probe(check.value, make_payload(), stream, context=context)
                verdict.outcomes.append(outcome)
                if not outcome.success:
                    return self._fail(verdict, check, outcome.reason)

        batches = (
            (PortCheck.CONCURRENT_BATCH, run_concurrent_batch),
            (PortCheck.SEQUENTIAL_BATCH, run_sequential_batch),
        )
        for check, run_batch in batches:
            result = run_batch(port, self.connector, context=context)
            verdict.batches.append(result)
            if not result.meets(self.threshold):
                log.warning("FAIL: %s", check.value)
                reason = f"{result.succeeded}/{result.attempted} succeeded, need at least {self.threshold}"
                return self._fail(verdict, check, reason)

        log.info("OK")
        verdict.passed = True
        return verdict

    @staticmethod
    def _fail(verdict: PortVerdict, check: PortCheck, reason: str | None) -> PortVerdict:
        verdict.passed = False
        verdict.failed_check = check
        verdict.reason = reason
        return verdict


__all__ = ["PortValidator"]
