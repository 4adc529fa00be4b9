# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bounds-checked byte access over caller-owned buffers.

Every access is checked before it happens, so a reader never looks past
the end of its data and a writer never stores past the end of its buffer.
"""

from .errors import BufferTooSmall, UnexpectedEndOfBuffer

# ceil(64 / 7): seven payload bits per byte over a 64-bit value
MAX_ENCODED_LEN = 10


class ByteReader:
    """Sequential reader over a bytes-like object."""

    def __init__(self, data):
        self._data = data
        self._pos = 0

    @property
    def bytes_read(self) -> int:
        return self._pos

    def read_u8(self) -> int:
        """
        Read the next byte.

        Raises:
            UnexpectedEndOfBuffer: If no bytes remain
        """
        if self._pos >= len(self._data):
            raise UnexpectedEndOfBuffer(
                f"LEB128 decode: unexpected end of buffer after {self._pos} bytes"
            )
        byte = self._data[self._pos]
        self._pos += 1
        return byte


class ByteWriter:
    """Sequential writer into a writable bytes-like object."""

    def __init__(self, buffer):
        self._buffer = buffer
        self._pos = 0

    @property
    def bytes_written(self) -> int:
        return self._pos

    def write_u8(self, byte: int) -> None:
        """
        Store one byte at the current position.

        Raises:
            BufferTooSmall: If the buffer is full
        """
        if self._pos >= len(self._buffer):
            raise BufferTooSmall(
                f"LEB128 encode: buffer of {len(self._buffer)} bytes is too small"
            )
        self._buffer[self._pos] = byte
        self._pos += 1
