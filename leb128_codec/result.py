# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Result types returned by the hardened encode/decode functions.

These carry the information the compatibility functions drop: whether an
encode was truncated, and why a decode failed.
"""

from dataclasses import dataclass
from enum import IntEnum

from .errors import TruncatedInputError, ValueOverflowError


class DecodeStatus(IntEnum):
    """Outcome of a decode."""
    OK = 0
    TRUNCATED_INPUT = 1
    OVERFLOW = 2

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EncodeResult:
    """Bytes written by an encode, and whether the encoding is complete."""
    written: int
    complete: bool

    @property
    def truncated(self) -> bool:
        return not self.complete


@dataclass(frozen=True)
class DecodeResult:
    """Decoded value (0 unless status is OK) and bytes consumed."""
    status: DecodeStatus
    value: int = 0
    consumed: int = 0

    @property
    def ok(self) -> bool:
        return self.status == DecodeStatus.OK

    def unwrap(self) -> int:
        """
        Return the decoded value.

        Raises:
            TruncatedInputError: If the input ended early
            ValueOverflowError: If the value exceeded the shift boundary
        """
        if self.status == DecodeStatus.TRUNCATED_INPUT:
            raise TruncatedInputError(
                f"LEB128 decode: unexpected end of data after {self.consumed} bytes"
            )
        if self.status == DecodeStatus.OVERFLOW:
            raise ValueOverflowError(
                f"LEB128 decode: value too large after {self.consumed} bytes"
            )
        return self.value
