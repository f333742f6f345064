# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-port, per-application and per-run verdict models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..constants import (
    ACTION_BINARY,
    ACTION_CONCURRENT_BATCH,
    ACTION_CONNECT,
    ACTION_LONG_TEXT,
    ACTION_SEQUENTIAL_BATCH,
    ACTION_SHORT_TEXT,
)
from .probe import BatchResult, ProbeOutcome


class PortCheck(str, Enum):
    """Ordered checks run against a single port."""

    CONNECT = ACTION_CONNECT
    SHORT_TEXT = ACTION_SHORT_TEXT
    LONG_TEXT = ACTION_LONG_TEXT
    BINARY = ACTION_BINARY
    CONCURRENT_BATCH = ACTION_CONCURRENT_BATCH
    SEQUENTIAL_BATCH = ACTION_SEQUENTIAL_BATCH


@dataclass
class PortVerdict:
    port: int
    passed: bool
    failed_check: PortCheck | None = None
    reason: str | None = None
    outcomes: list[ProbeOutcome] = field(default_factory=list)
    batches: list[BatchResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "port": self.port,
            "passed": self.passed,
            "failed_check": self.failed_check.value if self.failed_check else None,
            "reason": self.reason,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "batches": [batch.to_dict() for batch in self.batches],
        }


@dataclass
class ApplicationReport:
    name: str
    skipped: bool = False
    verdicts: list[PortVerdict] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(verdict.passed for verdict in self.verdicts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "skipped": self.skipped,
            "passed": self.passed,
            "ports": [verdict.to_dict() for verdict in self.verdicts],
        }


@dataclass
class RunReport:
    applications: list[ApplicationReport] = field(default_factory=list)

    @property
    def passed_ports(self) -> int:
        return sum(1 for app in self.applications for verdict in app.verdicts if verdict.passed)

    @property
    def failed_ports(self) -> int:
        return sum(1 for app in self.applications for verdict in app.verdicts if not verdict.passed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed_ports": self.passed_ports,
            "failed_ports": self.failed_ports,
            "applications": [app.to_dict() for app in self.applications],
        }
