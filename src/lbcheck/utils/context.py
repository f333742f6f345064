# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Explicit per-application/per-port logging context."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, MutableMapping

_DEFAULT_LOGGER_NAME = "lbcheck"


class _PrefixAdapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        prefix = self.extra.get("prefix") if self.extra else ""
        return (f"{prefix}{msg}" if prefix else msg), kwargs


@dataclass(frozen=True)
class ProbeContext:
    """
    Attribution carried through every probe, batch and port call.

    Immutable, so concurrently running batch tasks can share one instance
    without interfering with each other's log lines.
    """

    app: str | None = None
    port: int | None = None
    logger_name: str = _DEFAULT_LOGGER_NAME

    def for_port(self, port: int) -> "ProbeContext":
        return replace(self, port=port)

    @property
    def prefix(self) -> str:
        if self.app is None and self.port is None:
            return ""
        parts = [part for part in (self.app, f"port={self.port}" if self.port is not None else None) if part]
        return " ".join(parts) + " : "

    @property
    def logger(self) -> logging.LoggerAdapter:
        return _PrefixAdapter(logging.getLogger(self.logger_name), {"prefix": self.prefix})


__all__ = ["ProbeContext"]
