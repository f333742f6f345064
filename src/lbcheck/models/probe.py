# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe and batch result models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import ErrorCategory


@dataclass(frozen=True)
class ProbeOutcome:
    label: str
    success: bool
    error_category: ErrorCategory | None = None
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "success": self.success,
            "error_category": self.error_category.value if self.error_category else None,
            "reason": self.reason,
        }


class BatchPattern(str, Enum):
    CONCURRENT = "concurrent"
    SEQUENTIAL = "sequential"


@dataclass(frozen=True)
class BatchResult:
    """Success count of a fixed-size batch. The caller applies the pass threshold."""

    pattern: BatchPattern
    attempted: int
    succeeded: int

    def __post_init__(self) -> None:
        if not 0 <= self.succeeded <= self.attempted:
            raise ValueError(f"succeeded={self.succeeded} outside 0..{self.attempted}")

    def meets(self, threshold: int) -> bool:
        return self.succeeded >= threshold

    def to_dict(self) -> dict[str, Any]:
        return {"pattern": self.pattern.value, "attempted": self.attempted, "succeeded": self.succeeded}
