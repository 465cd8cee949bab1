# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Reading and writing single varints on binary file-like objects.

The stream only needs read(n) / write(data). Reads are one byte at a
time so that exactly the bytes of the varint are consumed.
"""

import logging
from typing import BinaryIO

from .varint import (
    MAX_VARINT_BYTES,
    VarintError,
    decode_varint,
    encode_varint,
)

logger = logging.getLogger(__name__)


def read_varint(stream: BinaryIO, strict: bool = False) -> int:
    """
    Read one varint from a stream.

    Args:
        stream: Binary stream positioned at the start of a varint
        strict: Reject encodings with a redundant trailing zero group

    Returns:
        Decoded value

    Raises:
        TruncatedVarintError: If the stream ends before the varint does
        VarintOverflowError: If the varint needs more than 64 bits
        NonCanonicalVarintError: If strict and the encoding is not minimal
    """
    buf = bytearray()
    while len(buf) < MAX_VARINT_BYTES:
        byte = stream.read(1)
        if not byte:
            break
        buf.append(byte[0])
        if not (byte[0] & 0x80):
            break

    try:
        value, _ = decode_varint(buf, strict=strict)
    except VarintError as e:
        logger.debug(f"Failed to read varint from stream ({buf.hex()}): {e}")
        raise
    return value


def write_varint(stream: BinaryIO, value: int) -> int:
    """
    Write one varint to a stream.

    Returns:
        Number of bytes written
    """
    data = encode_varint(value)
    stream.write(data)
    return len(data)
