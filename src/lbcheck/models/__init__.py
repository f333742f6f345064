# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed domain models for lbcheck."""

from .app import AppConfig, Application
from .probe import BatchPattern, BatchResult, ProbeOutcome
from .report import ApplicationReport, PortCheck, PortVerdict, RunReport

__all__ = [
    "AppConfig",
    "Application",
    "ApplicationReport",
    "BatchPattern",
    "BatchResult",
    "PortCheck",
    "PortVerdict",
    "ProbeOutcome",
    "RunReport",
]
