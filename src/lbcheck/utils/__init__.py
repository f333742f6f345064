# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared helpers."""

from .context import ProbeContext

__all__ = ["ProbeContext"]
