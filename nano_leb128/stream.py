# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 values over binary streams.

Works with any object offering read(size) / write(data) on bytes, such as
files opened in binary mode, io.BytesIO or serial.Serial.
"""

from typing import Tuple, Type, Union

from .buffer import MAX_ENCODED_LEN
from .errors import UnexpectedEndOfBuffer
from .sleb128 import SLEB128
from .uleb128 import ULEB128

Codec = Union[ULEB128, SLEB128]


def read_value(codec_cls: Type[Codec], stream) -> Tuple[Codec, int]:
    """
    Read one encoded value from a stream.

    Bytes are read one at a time so nothing past the terminating byte is
    consumed.

    Args:
        codec_cls: ULEB128 or SLEB128
        stream: Binary stream to read from

    Returns:
        Tuple of (decoded value, number of bytes read)

    Raises:
        UnexpectedEndOfBuffer: If the stream ends before the terminating byte
        Overflow: If the value does not fit in 64 bits
    """
    buf = bytearray()

    while True:
        byte = stream.read(1)
        if not byte:
            raise UnexpectedEndOfBuffer(
                f"LEB128 decode: end of stream after {len(buf)} bytes"
            )
        buf.append(byte[0])

        try:
            return codec_cls.read_from(buf)
        except UnexpectedEndOfBuffer:
            continue


def write_value(stream, codec: Codec) -> int:
    """
    Write one encoded value to a stream.

    Unbuffered streams may accept fewer bytes per write() call, so writing
    repeats until the whole encoding is out.

    Args:
        stream: Binary stream to write to
        codec: Value to encode

    Returns:
        Number of bytes written

    Raises:
        OSError: If the stream stops accepting bytes
    """
    buf = bytearray(MAX_ENCODED_LEN)
    length = codec.write_into(buf)

    remaining = memoryview(buf)[:length]
    while remaining:
        written = stream.write(bytes(remaining))
        # None: stream does not report a count (buffered writers take it all)
        if written is None:
            break
        if written == 0:
            raise OSError(f"LEB128 write: stream accepted 0 of {len(remaining)} bytes")
        remaining = remaining[written:]

    return length


def read_uleb128(stream) -> Tuple[int, int]:
    """Read a ULEB128 value. Returns (value, bytes read)."""
    decoded, length = read_value(ULEB128, stream)
    return decoded.value, length


def read_sleb128(stream) -> Tuple[int, int]:
    """Read an SLEB128 value. Returns (value, bytes read)."""
    decoded, length = read_value(SLEB128, stream)
    return decoded.value, length


def write_uleb128(stream, value: int) -> int:
    """Write a ULEB128 value. Returns the number of bytes written."""
    return write_value(stream, ULEB128(value))


def write_sleb128(stream, value: int) -> int:
    """Write an SLEB128 value. Returns the number of bytes written."""
    return write_value(stream, SLEB128(value))
