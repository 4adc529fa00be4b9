# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed LEB128 encoding/decoding.

Same 7-bit grouping as the unsigned variant, over the two's-complement
representation. Bit 6 of the final byte carries the sign: the decoder
sign-extends from it, and the encoder keeps emitting bytes until that bit
agrees with the sign of what remains.
"""

import operator
from dataclasses import dataclass
from typing import Tuple

from .buffer import MAX_ENCODED_LEN, ByteReader, ByteWriter
from .errors import Overflow

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1

_SIGN_BIT = 0x40
_U64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class SLEB128:
    """
    A 64-bit signed value that (de)serializes as signed LEB128.

    Example:
        buf = bytearray(3)
        SLEB128(-123456).write_into(buf)  # -> 3, buf == b"\\xC0\\xBB\\x78"
        SLEB128.read_from(buf)            # -> (SLEB128(value=-123456), 3)
    """
    value: int

    def __post_init__(self):
        # Stored as a plain int; floats and other non-integers raise TypeError
        object.__setattr__(self, "value", int(operator.index(self.value)))
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"SLEB128 value out of range: {self.value}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def encoded_len(self) -> int:
        """Number of bytes write_into() will produce."""
        # One extra bit for the sign; ~v has the magnitude bits of a negative v
        magnitude = self.value if self.value >= 0 else ~self.value
        return (magnitude.bit_length() + 7) // 7

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
        more = True

        while more:
            byte = value & 0x7F
            # Python's >> on int is arithmetic
            value >>= 7

            if (value == 0 and not (byte & _SIGN_BIT)) or (
                value == -1 and (byte & _SIGN_BIT)
            ):
                more = False
            else:
                byte |= 0x80

            writer.write_u8(byte)

        return writer.bytes_written

    @classmethod
    def read_from(cls, data) -> Tuple["SLEB128", int]:
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

            # Only bit 63 is left: the 10th byte must be a pure sign byte
            if shift == 63 and byte != 0x00 and byte != 0x7F:
                raise Overflow("SLEB128 decode: value too large")

            result |= (byte & 0x7F) << shift
            shift += 7

            if not (byte & 0x80):
                break

        if shift < 64 and (byte & _SIGN_BIT):
            result |= -1 << shift

        result &= _U64_MASK
        if result > I64_MAX:
            result -= 1 << 64

        return cls(result), reader.bytes_read


def encode_sleb128(value: int) -> bytes:
    """
    Encode a signed integer as SLEB128.

    Args:
        value: Integer in [-2**63, 2**63 - 1]

    Returns:
        Encoded bytes

    Raises:
        ValueError: If value is out of range
    """
    buf = bytearray(MAX_ENCODED_LEN)
    length = SLEB128(value).write_into(buf)
    return bytes(buf[:length])


def decode_sleb128(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an SLEB128 value from bytes.

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

    decoded, length = SLEB128.read_from(memoryview(data)[offset:])
    return decoded.value, offset + length
