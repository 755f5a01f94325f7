# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 decoder.

decode() keeps the sentinel behaviour: truncated input and overflow both
return 0, the same as a legitimately encoded zero. decode_result() and
decode_bytes() tell the three outcomes apart.
"""

import logging
from typing import Tuple

from .result import DecodeResult, DecodeStatus
from .wire import (
    CONTINUATION_BIT,
    GROUP_BITS,
    MAX_ENCODED_LEN,
    MAX_SHIFT,
    PAYLOAD_MASK,
)

logger = logging.getLogger(__name__)


def _decode_at(data, offset: int, end: int, full_width: bool) -> DecodeResult:
    value = 0
    shift = 0
    consumed = 0

    for _ in range(MAX_ENCODED_LEN):
        if offset + consumed >= end:
            logger.debug("LEB128 decode: unexpected end of data after %d bytes", consumed)
            return DecodeResult(DecodeStatus.TRUNCATED_INPUT, consumed=consumed)

        if shift >= MAX_SHIFT and not full_width:
            logger.debug("LEB128 decode: shift reached %d", shift)
            return DecodeResult(DecodeStatus.OVERFLOW, consumed=consumed)

        byte = data[offset + consumed]
        consumed += 1

        # The 10th byte may only supply bit 63 and must end the value.
        if shift >= MAX_SHIFT and byte > 1:
            logger.debug("LEB128 decode: final byte %#04x exceeds 64 bits", byte)
            return DecodeResult(DecodeStatus.OVERFLOW, consumed=consumed)

        value |= (byte & PAYLOAD_MASK) << shift

        if not (byte & CONTINUATION_BIT):
            return DecodeResult(DecodeStatus.OK, value=value, consumed=consumed)

        shift += GROUP_BITS

    # Not reached: the 10th byte always ends the loop above.
    return DecodeResult(DecodeStatus.OVERFLOW, consumed=consumed)


def _check_length(buffer, length: int) -> None:
    if length < 0:
        raise ValueError("Length must not be negative")
    if len(buffer) < length:
        raise ValueError(f"Buffer holds {len(buffer)} bytes, length is {length}")


def decode_result(buffer, length: int, *, full_width: bool = False) -> DecodeResult:
    """
    Decode one LEB128 value from the first length bytes of buffer.

    Args:
        buffer: Readable byte buffer (bytes, bytearray, memoryview, ...)
        length: Number of readable bytes in buffer (may be 0)
        full_width: Accept a 10th byte carrying bit 63, so the whole
            64-bit range decodes. By default decoding stops once the
            shift reaches 63, like decode().

    Returns:
        DecodeResult with status OK, TRUNCATED_INPUT or OVERFLOW

    Raises:
        ValueError: If length is negative or larger than buffer
    """
    _check_length(buffer, length)
    return _decode_at(buffer, 0, length, full_width)


def decode(buffer, length: int) -> int:
    """
    Decode one LEB128 value, returning 0 on truncated or oversized input.

    A return value of 0 does not distinguish a decoded zero from a
    failure. Use decode_result() when the difference matters.
    """
    result = decode_result(buffer, length)
    if not result.ok:
        return 0
    return result.value


def decode_bytes(data: bytes, offset: int = 0, *, full_width: bool = True) -> Tuple[int, int]:
    """
    Decode a LEB128 value from bytes.

    Args:
        data: Bytes containing the value
        offset: Starting offset in data
        full_width: Accept the whole 64-bit range (see decode_result)

    Returns:
        Tuple of (decoded value, new offset after the value)

    Raises:
        TruncatedInputError: If data ends before the value does
        ValueOverflowError: If the value is wider than 64 bits
    """
    if offset < 0:
        raise ValueError("Offset must not be negative")
    result = _decode_at(data, offset, len(data), full_width)
    return result.unwrap(), offset + result.consumed
