# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 wire format constants.

Each encoded byte carries 7 payload bits in bits 0-6 and a continuation
flag in bit 7. Groups are written least significant first.
"""

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F
GROUP_BITS = 7

UINT64_MAX = (1 << 64) - 1

# ceil(64 / 7)
MAX_ENCODED_LEN = 10

# Decoding stops with an overflow once the shift reaches this value.
MAX_SHIFT = 63


def check_uint64(value: int) -> None:
    """Raise ValueError unless value fits in a 64-bit unsigned integer."""
    if value < 0:
        raise ValueError("Cannot encode negative value as LEB128")
    if value > UINT64_MAX:
        raise ValueError(f"Value {value:#x} does not fit in 64 bits")


def encoded_length(value: int) -> int:
    """
    Number of bytes the LEB128 encoding of value occupies.

    Args:
        value: Integer in the 64-bit unsigned range

    Returns:
        max(1, ceil(bit_length / 7))

    Raises:
        ValueError: If value is negative or wider than 64 bits
    """
    check_uint64(value)
    return max(1, -(-value.bit_length() // GROUP_BITS))
