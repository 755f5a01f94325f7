# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 encoder.

Writes into a caller-owned buffer with an explicit capacity. Output that
does not fit is silently truncated: the bytes written are a prefix of the
full encoding and will not decode back to the original value.
"""

import logging

from .result import EncodeResult
from .wire import (
    CONTINUATION_BIT,
    GROUP_BITS,
    MAX_ENCODED_LEN,
    PAYLOAD_MASK,
    check_uint64,
)

logger = logging.getLogger(__name__)


def encode_into(value: int, buffer: bytearray, capacity: int) -> EncodeResult:
    """
    Encode value into buffer, writing at most capacity bytes.

    Args:
        value: Integer in the 64-bit unsigned range
        buffer: Mutable byte buffer with room for at least capacity bytes
        capacity: Maximum number of bytes to write (may be 0)

    Returns:
        EncodeResult with the number of bytes written and whether the
        encoding was written in full

    Raises:
        ValueError: If value is out of range, capacity is negative, or
            buffer is smaller than capacity
    """
    check_uint64(value)
    if capacity < 0:
        raise ValueError("Capacity must not be negative")
    if len(buffer) < capacity:
        raise ValueError(
            f"Buffer holds {len(buffer)} bytes, capacity is {capacity}"
        )

    original = value
    written = 0
    for _ in range(MAX_ENCODED_LEN):
        byte = value & PAYLOAD_MASK
        value >>= GROUP_BITS
        if value:
            byte |= CONTINUATION_BIT

        # Check before every write; running out of room ends the encode.
        if written >= capacity:
            logger.debug(
                "Truncated encoding of %d after %d of %d bytes",
                original, written, capacity,
            )
            return EncodeResult(written=written, complete=False)

        buffer[written] = byte
        written += 1

        if not value:
            break

    return EncodeResult(written=written, complete=True)


def encode(value: int, buffer: bytearray, capacity: int) -> int:
    """
    Encode value into buffer and return the number of bytes written.

    Truncation is not reported; use encode_into() to find out whether the
    whole value was written.
    """
    return encode_into(value, buffer, capacity).written


def encode_bytes(value: int) -> bytes:
    """
    Encode value as a standalone byte string.

    Args:
        value: Integer in the 64-bit unsigned range

    Returns:
        Complete LEB128 encoding (1 to 10 bytes)
    """
    buffer = bytearray(MAX_ENCODED_LEN)
    result = encode_into(value, buffer, len(buffer))
    return bytes(buffer[:result.written])
