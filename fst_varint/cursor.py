# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Sequential access to buffers holding back-to-back varint fields.
"""

import logging
from typing import Iterable, Iterator, List

from .varint import BytesLike, VarintError, decode_varint, encode_varint

logger = logging.getLogger(__name__)


class VarintCursor:
    """
    Reads consecutive varints from a buffer, advancing past each one.

    A failed read leaves the cursor where it was:
        cursor = VarintCursor(data)
        count = cursor.read()
        values = cursor.read_many(count)
    """

    def __init__(self, data: BytesLike, offset: int = 0, strict: bool = False):
        if offset < 0 or offset > len(data):
            raise ValueError(f"Offset {offset} outside buffer of {len(data)} bytes")
        self._data = data
        self._offset = offset
        self._strict = strict

    @property
    def offset(self) -> int:
        """Position of the next field."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Bytes left after the current position."""
        return len(self._data) - self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def read(self) -> int:
        """Decode the next field and advance past it."""
        try:
            value, consumed = decode_varint(self._data, self._offset, self._strict)
        except VarintError as e:
            logger.debug(f"Varint decode failed at offset {self._offset}: {e}")
            raise
        self._offset += consumed
        return value

    def read_many(self, count: int) -> List[int]:
        """Decode the next `count` fields."""
        start = self._offset
        try:
            return [self.read() for _ in range(count)]
        except VarintError:
            self._offset = start
            raise

    def skip(self, count: int = 1) -> None:
        """Advance past `count` fields."""
        self.read_many(count)

    def __iter__(self) -> Iterator[int]:
        while not self.at_end:
            yield self.read()


def encode_varints(values: Iterable[int]) -> bytes:
    """Encode values as consecutive varints."""
    return b"".join(encode_varint(v) for v in values)


def decode_varints(
    data: BytesLike,
    offset: int = 0,
    strict: bool = False,
) -> List[int]:
    """
    Decode every varint from offset to the end of data.

    Raises:
        TruncatedVarintError: If the last field is cut short
    """
    return list(VarintCursor(data, offset, strict))
