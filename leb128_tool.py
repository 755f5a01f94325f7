#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for encoding and decoding unsigned LEB128 values.

Usage:
    python leb128_tool.py encode 300
    python leb128_tool.py encode 300 --capacity 1
    python leb128_tool.py decode ac02
    python leb128_tool.py decode 172,2
    python leb128_tool.py demo

Set LEB128_VERBOSITY to a logging level number (e.g. 10) or pass
--verbose to see debug output from the codec.
"""

import argparse
import logging
import os
import sys

from leb128_codec import (
    MAX_ENCODED_LEN,
    Leb128Error,
    decode,
    decode_result,
    encode,
    encode_into,
    encoded_length,
)

LOG_FORMAT = "[%(asctime)s] - [%(levelname)s] > %(message)s"


def log_level(verbose: bool) -> int:
    """Pick the log level from --verbose or LEB128_VERBOSITY."""
    if verbose:
        return logging.DEBUG
    level = os.environ.get("LEB128_VERBOSITY")
    if level:
        try:
            return int(level)
        except ValueError:
            raise ValueError(f"LEB128_VERBOSITY must be an integer, got {level!r}")
    return logging.WARNING


def parse_int(text: str) -> int:
    """argparse type accepting decimal, 0x hex, 0o and 0b literals."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def parse_bytes(text: str) -> bytes:
    """
    Parse encoded bytes from the command line.

    Comma-separated input is read as decimal byte values ("172,2"),
    anything else as hex ("ac02", "ac 02").
    """
    if "," in text:
        values = [int(part) for part in text.split(",") if part.strip()]
        for value in values:
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Byte value out of range: {value}")
        return bytes(values)
    return bytes.fromhex(text)


def format_bytes(data: bytes) -> str:
    return ",".join(str(b) for b in data)


def cmd_encode(value: int, capacity: int):
    """Encode a value into a buffer of the given capacity."""
    buf = bytearray(max(capacity, 0))
    result = encode_into(value, buf, capacity)
    data = bytes(buf[:result.written])

    print(format_bytes(data))
    print(f"Hex: {data.hex()}")

    if result.truncated:
        print(
            f"Warning: output truncated to {result.written} of "
            f"{encoded_length(value)} bytes",
            file=sys.stderr,
        )


def cmd_decode(data: bytes, full_width: bool):
    """Decode a value from encoded bytes."""
    result = decode_result(data, len(data), full_width=full_width)
    print(result.unwrap())

    trailing = len(data) - result.consumed
    if trailing:
        print(f"Warning: ignored {trailing} trailing bytes", file=sys.stderr)


def cmd_demo():
    """Encode 300 into a two-byte buffer and decode it back."""
    buf = bytearray(2)
    encode(300, buf, len(buf))
    # Should print 172,2
    print(format_bytes(buf))
    # Should print 300
    print(decode(buf, len(buf)))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Unsigned LEB128 encoder/decoder"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode an unsigned integer")
    encode_parser.add_argument("value", type=parse_int, help="Value to encode")
    encode_parser.add_argument("--capacity", "-c", type=int, default=MAX_ENCODED_LEN,
                               help=f"Output buffer size (default {MAX_ENCODED_LEN})")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode LEB128 bytes")
    decode_parser.add_argument("data", help="Hex (ac02) or decimal list (172,2)")
    decode_parser.add_argument("--full-width", action="store_true",
                               help="Accept values that need bit 63")

    # demo command
    subparsers.add_parser("demo", help="Round-trip 300 through a 2-byte buffer")

    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=log_level(args.verbose), format=LOG_FORMAT)

        if args.command == "encode":
            cmd_encode(args.value, args.capacity)
        elif args.command == "decode":
            cmd_decode(parse_bytes(args.data), args.full_width)
        elif args.command == "demo":
            cmd_demo()
    except (Leb128Error, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
