# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Package version."""

__all__ = ["__version__"]

__version__ = "0.1.0"
