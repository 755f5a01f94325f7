# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest fixtures for codec tests."""

import pytest

from leb128_codec.wire import MAX_ENCODED_LEN

# Fill byte for guarded buffers; never produced by encoding 300.
GUARD = 0xEE


@pytest.fixture
def buffer():
    """A zeroed buffer large enough for any 64-bit value."""
    return bytearray(MAX_ENCODED_LEN)


@pytest.fixture
def guard():
    """Fill byte used by guarded_buffer."""
    return GUARD


@pytest.fixture
def guarded_buffer():
    """
    Factory for a buffer pre-filled with GUARD bytes.

    Any position still holding GUARD after an encode was not written.
    """
    def make(size: int = MAX_ENCODED_LEN + 4) -> bytearray:
        return bytearray([GUARD] * size)
    return make
