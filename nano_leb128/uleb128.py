# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 encoding/decoding.

Values are split into 7-bit groups, least significant group first. Bit 7
of every byte except the last is set to mark that more bytes follow.
"""

import operator
from dataclasses import dataclass
from typing import Tuple

from .buffer import MAX_ENCODED_LEN, ByteReader, ByteWriter
from .errors import Overflow

U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class ULEB128:
    """
    A 64-bit unsigned value that (de)serializes as unsigned LEB128.

    Example:
        buf = bytearray(3)
        ULEB128(624485).write_into(buf)   # -> 3, buf == b"\\xE5\\x8E\\x26"
        ULEB128.read_from(buf)            # -> (ULEB128(value=624485), 3)
    """
    value: int

    def __post_init__(self):
        # Stored as a plain int; floats and other non-integers raise TypeError
        object.__setattr__(self, "value", int(operator.index(self.value)))
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"ULEB128 value out of range: {self.value}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def encoded_len(self) -> int:
        """Number of bytes write_into() will produce."""
        return max(1, (self.value.bit_length() + 6) // 7)

    def write_into(self, buffer) -> int:
        """
        Encode into a caller-supplied buffer.

        Args:
            buffer: Writable bytes-like object (bytearray, memoryview)

        Returns:
            Number of bytes written

        Raises:
            BufferTooSmall: If the buffer cannot hold the encoding. The
                buffer contents are unspecified in that case.
        """
        writer = ByteWriter(buffer)
        value = self.value

        while True:
            byte = value & 0x7F
            value >>= 7
            if value != 0:
                byte |= 0x80

            writer.write_u8(byte)

            if value == 0:
                return writer.bytes_written

    @classmethod
    def read_from(cls, data) -> Tuple["ULEB128", int]:
        """
        Decode a value from the start of a bytes-like object.

        Bytes after the terminating byte are ignored.

        Args:
            data: Bytes containing the encoded value

        Returns:
            Tuple of (decoded value, number of bytes consumed)

        Raises:
            UnexpectedEndOfBuffer: If data ends before the terminating byte
            Overflow: If the encoding does not fit in 64 bits
        """
        reader = ByteReader(data)
        result = 0
        shift = 0

        while True:
            byte = reader.read_u8()

            # The 10th byte may only contribute bit 63
            if shift == 63 and byte > 1:
                raise Overflow("ULEB128 decode: value too large")

            result |= (byte & 0x7F) << shift

            if not (byte & 0x80):
                return cls(result), reader.bytes_read

            shift += 7


def encode_uleb128(value: int) -> bytes:
    """
    Encode an unsigned integer as ULEB128.

    Args:
        value: Integer in [0, 2**64 - 1]

    Returns:
        Encoded bytes

    Raises:
        ValueError: If value is out of range
    """
    buf = bytearray(MAX_ENCODED_LEN)
    length = ULEB128(value).write_into(buf)
    return bytes(buf[:length])


def decode_uleb128(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a ULEB128 value from bytes.

    Args:
        data: Bytes containing the value
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after the value)

    Raises:
        UnexpectedEndOfBuffer: If the value is truncated
        Overflow: If the value does not fit in 64 bits
        ValueError: If offset is negative
    """
    if offset < 0:
        raise ValueError(f"Negative offset: {offset}")

    decoded, length = ULEB128.read_from(memoryview(data)[offset:])
    return decoded.value, offset + length
