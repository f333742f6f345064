# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from lbcheck.errors import InvalidArgument
from lbcheck.probe.payloads import ALPHABET, generate_binary, generate_text


def test_alphabet_is_52_mixed_case_letters():
    assert len(ALPHABET) == 52
    assert len(set(ALPHABET)) == 52
    assert ALPHABET.isascii() and ALPHABET.isalpha()


@pytest.mark.parametrize("size", [0, 1, 100, 65536])
def test_generate_text_length_and_alphabet(size):
    text = generate_text(size)
    assert len(text) == size
    assert set(text) <= set(ALPHABET)
    assert len(text.encode("ascii")) == size


@pytest.mark.parametrize("size", [0, 1, 200, 4096])
def test_generate_binary_length(size):
    data = generate_binary(size)
    assert isinstance(data, bytes)
    assert len(data) == size


def test_generate_binary_covers_byte_range():
    data = generate_binary(65536)
    # 64 KiB of uniform bytes hits far more than half the byte values.
    assert len(set(data)) > 200


@pytest.mark.parametrize("generator", [generate_text, generate_binary])
def test_negative_size_is_rejected(generator):
    with pytest.raises(InvalidArgument):
        generator(-1)
    with pytest.raises(ValueError):
        generator(-5)
