# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
FST varint codec - Python library.

This package provides the unsigned varint (LEB128) codec used for every
timestamp, handle and length field in FST value-change trace files.

Example usage:
    from fst_varint import encode_varint, decode_varint, VarintCursor

    data = encode_varint(300)          # b"\\xac\\x02"
    value, consumed = decode_varint(data)

    # Walk a block of consecutive fields
    cursor = VarintCursor(block)
    count = cursor.read()
    deltas = cursor.read_many(count)
"""

from .cursor import VarintCursor, encode_varints, decode_varints
from .length import varint_length
from .stream import read_varint, write_varint
from .varint import (
    MAX_VARINT_BYTES,
    U64_MAX,
    VarintError,
    TruncatedVarintError,
    VarintOverflowError,
    NonCanonicalVarintError,
    encode_varint,
    decode_varint,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "MAX_VARINT_BYTES",
    "U64_MAX",
    # Errors
    "VarintError",
    "TruncatedVarintError",
    "VarintOverflowError",
    "NonCanonicalVarintError",
    # Codec
    "encode_varint",
    "decode_varint",
    "varint_length",
    # Streams
    "read_varint",
    "write_varint",
    # Buffers
    "VarintCursor",
    "encode_varints",
    "decode_varints",
]
