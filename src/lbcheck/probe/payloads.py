# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Randomized probe payloads."""

from __future__ import annotations

import random
import string

from ..errors import InvalidArgument

ALPHABET = string.ascii_lowercase + string.ascii_uppercase


def _check_size(size: int) -> None:
    if size < 0:
        raise InvalidArgument(f"payload size must be non-negative, got {size}")


def generate_text(size: int) -> str:
    """Return `size` letters drawn with replacement from the 52-letter ASCII alphabet."""
    _check_size(size)
    return "".join(random.choices(ALPHABET, k=size))


def generate_binary(size: int) -> bytes:
    """
    Return `size` uniformly random bytes.

    The result may contain the frame delimiter; such a payload is cut short on
    read-back and the probe fails.
    """
    _check_size(size)
    return random.randbytes(size)


__all__ = ["ALPHABET", "generate_binary", "generate_text"]
