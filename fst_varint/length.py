# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Encoded length of a varint, computed without building the bytes.

Callers use this to size output buffers or to check a field width
before decoding it.
"""

from .varint import MAX_VARINT_BYTES, _check_domain

# Smallest value needing (index + 2) bytes: 2^7, 2^14, ..., 2^63
_LENGTH_THRESHOLDS = []


def _init_table():
    """Initialize the byte-count threshold table."""
    global _LENGTH_THRESHOLDS
    for count in range(1, MAX_VARINT_BYTES):
        _LENGTH_THRESHOLDS.append(1 << (7 * count))


_init_table()


def varint_length(value: int) -> int:
    """
    Number of bytes encode_varint(value) produces.

    Args:
        value: Integer in [0, 2^64-1]

    Returns:
        Byte count, 1 to 10

    Raises:
        ValueError: If value is negative or does not fit in 64 bits
    """
    _check_domain(value)

    for count, threshold in enumerate(_LENGTH_THRESHOLDS, start=1):
        if value < threshold:
            return count
    return MAX_VARINT_BYTES
