# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the strict LEB128 helpers."""


class Leb128Error(ValueError):
    """Base exception for LEB128 decoding errors."""
    pass


class TruncatedInputError(Leb128Error):
    """Input ended before a byte with the continuation bit clear."""
    pass


class ValueOverflowError(Leb128Error):
    """Encoded value is wider than the decoder accepts."""
    pass
