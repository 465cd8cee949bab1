# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (unsigned LEB128, as used by FST trace files).

Each byte carries 7 value bits, least significant group first. Bit 7 is
the continuation flag: set on every byte except the last.
"""

from typing import Tuple, Union

# Largest value representable in the 64-bit domain
U64_MAX = (1 << 64) - 1

# ceil(64 / 7)
MAX_VARINT_BYTES = 10

# Shift of the tenth byte, which only has room for bit 63
_LAST_GROUP_SHIFT = 7 * (MAX_VARINT_BYTES - 1)

BytesLike = Union[bytes, bytearray, memoryview]


class VarintError(ValueError):
    """Base exception for varint decode errors."""
    pass


class TruncatedVarintError(VarintError):
    """Data ended before a byte with the continuation bit clear."""
    pass


class VarintOverflowError(VarintError):
    """Encoded value does not fit in 64 bits."""
    pass


class NonCanonicalVarintError(VarintError):
    """Encoding carries a redundant trailing zero group (strict mode)."""
    pass


def _check_domain(value: int) -> None:
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    if value > U64_MAX:
        raise ValueError("Cannot encode value above 2^64-1 as varint")


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a varint.

    Args:
        value: Integer in [0, 2^64-1]

    Returns:
        Varint-encoded bytes (1 to 10 bytes)

    Raises:
        ValueError: If value is negative or does not fit in 64 bits
    """
    _check_domain(value)

    result = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            result.append(byte | 0x80)
        else:
            result.append(byte)
            break
    return bytes(result)


def decode_varint(
    data: BytesLike,
    offset: int = 0,
    strict: bool = False,
) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint (not modified)
        offset: Starting offset in data
        strict: Reject encodings with a redundant trailing zero group

    Returns:
        Tuple of (decoded value, number of bytes consumed from offset)

    Raises:
        ValueError: If offset is negative
        TruncatedVarintError: If data ends before the varint does
        VarintOverflowError: If the varint needs more than 64 bits
        NonCanonicalVarintError: If strict and the encoding is not minimal
    """
    if offset < 0:
        raise ValueError("Varint decode: offset must be non-negative")

    value = 0
    shift = 0
    index = offset

    while index < len(data):
        byte = data[index]
        index += 1

        if shift == _LAST_GROUP_SHIFT and byte & 0xFE:
            raise VarintOverflowError("Varint decode: value too large")

        value |= (byte & 0x7F) << shift

        if not (byte & 0x80):
            consumed = index - offset
            if strict and consumed > 1 and byte == 0:
                raise NonCanonicalVarintError(
                    "Varint decode: non-canonical encoding"
                )
            return value, consumed

        shift += 7

    raise TruncatedVarintError("Varint decode: unexpected end of data")
