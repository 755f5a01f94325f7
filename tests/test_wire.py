# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for wire format constants and result types."""

import pytest
from leb128_codec.errors import TruncatedInputError, ValueOverflowError
from leb128_codec.result import DecodeResult, DecodeStatus, EncodeResult
from leb128_codec.wire import (
    CONTINUATION_BIT,
    MAX_ENCODED_LEN,
    PAYLOAD_MASK,
    UINT64_MAX,
    encoded_length,
)


class TestConstants:
    """Tests for wire format constants."""

    def test_bits(self):
        """Continuation flag and payload mask split the byte."""
        assert CONTINUATION_BIT == 0x80
        assert PAYLOAD_MASK == 0x7F
        assert CONTINUATION_BIT | PAYLOAD_MASK == 0xFF
        assert CONTINUATION_BIT & PAYLOAD_MASK == 0

    def test_limits(self):
        """64-bit range needs at most ten bytes."""
        assert UINT64_MAX == 0xFFFFFFFFFFFFFFFF
        assert MAX_ENCODED_LEN == 10


class TestEncodedLength:
    """Tests for encoded_length function."""

    @pytest.mark.parametrize("value,expected", [
        (0, 1),
        (1, 1),
        (127, 1),
        (128, 2),
        (300, 2),
        (16383, 2),
        (16384, 3),
        ((1 << 63) - 1, 9),
        (1 << 63, 10),
        (UINT64_MAX, 10),
    ])
    def test_lengths(self, value, expected):
        """Known lengths."""
        assert encoded_length(value) == expected

    def test_out_of_range_raises(self):
        """Values outside the 64-bit unsigned range raise ValueError."""
        with pytest.raises(ValueError, match="Cannot encode negative"):
            encoded_length(-1)
        with pytest.raises(ValueError, match="does not fit in 64 bits"):
            encoded_length(UINT64_MAX + 1)


class TestDecodeStatusEnum:
    """Tests for DecodeStatus enum."""

    def test_values(self):
        """DecodeStatus enum has correct values."""
        assert DecodeStatus.OK == 0
        assert DecodeStatus.TRUNCATED_INPUT == 1
        assert DecodeStatus.OVERFLOW == 2
        assert len(DecodeStatus) == 3

    def test_str(self):
        """DecodeStatus __str__ returns name."""
        assert str(DecodeStatus.OK) == "OK"
        assert str(DecodeStatus.OVERFLOW) == "OVERFLOW"


class TestResults:
    """Tests for EncodeResult and DecodeResult."""

    def test_encode_result(self):
        """truncated is the inverse of complete."""
        assert EncodeResult(written=2, complete=True).truncated is False
        assert EncodeResult(written=1, complete=False).truncated is True

    def test_unwrap_ok(self):
        """unwrap returns the value on success."""
        assert DecodeResult(DecodeStatus.OK, value=300, consumed=2).unwrap() == 300

    def test_unwrap_truncated(self):
        """unwrap raises TruncatedInputError."""
        result = DecodeResult(DecodeStatus.TRUNCATED_INPUT, consumed=3)
        with pytest.raises(TruncatedInputError, match="after 3 bytes"):
            result.unwrap()

    def test_unwrap_overflow(self):
        """unwrap raises ValueOverflowError."""
        result = DecodeResult(DecodeStatus.OVERFLOW, consumed=9)
        with pytest.raises(ValueOverflowError, match="value too large after 9 bytes"):
            result.unwrap()

    def test_frozen(self):
        """Results are immutable."""
        result = DecodeResult(DecodeStatus.OK, value=1, consumed=1)
        with pytest.raises(AttributeError):
            result.value = 2
