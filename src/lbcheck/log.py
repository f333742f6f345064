# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for lbcheck."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = os.getenv("LBCHECK_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI use; outcomes go to stdout."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stdout,
    )


__all__ = ["setup_logging"]
