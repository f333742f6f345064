# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Validation orchestration: per-port checks and per-application walks."""

from .port import PortValidator
from .runner import ApplicationValidator, ValidationRunner

__all__ = ["ApplicationValidator", "PortValidator", "ValidationRunner"]
