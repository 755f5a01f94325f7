# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 codec for 64-bit integers.

Example usage:
    from leb128_codec import encode, decode, decode_result

    buf = bytearray(2)
    written = encode(300, buf, len(buf))   # buf == bytearray(b"\\xac\\x02")
    value = decode(buf, written)           # 300

    result = decode_result(b"\\x80", 1)
    if not result.ok:
        print(f"Decode failed: {result.status}")   # TRUNCATED_INPUT
"""

from .decoder import decode, decode_bytes, decode_result
from .encoder import encode, encode_bytes, encode_into
from .errors import Leb128Error, TruncatedInputError, ValueOverflowError
from .result import DecodeResult, DecodeStatus, EncodeResult
from .wire import (
    CONTINUATION_BIT,
    MAX_ENCODED_LEN,
    PAYLOAD_MASK,
    UINT64_MAX,
    encoded_length,
)

__version__ = "0.1.0"

__all__ = [
    # Encoder
    "encode",
    "encode_into",
    "encode_bytes",
    # Decoder
    "decode",
    "decode_result",
    "decode_bytes",
    # Results
    "DecodeResult",
    "DecodeStatus",
    "EncodeResult",
    # Errors
    "Leb128Error",
    "TruncatedInputError",
    "ValueOverflowError",
    # Wire format
    "CONTINUATION_BIT",
    "PAYLOAD_MASK",
    "MAX_ENCODED_LEN",
    "UINT64_MAX",
    "encoded_length",
]
