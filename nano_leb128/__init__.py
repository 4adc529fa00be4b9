# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
nano-leb128 - Little Endian Base 128 variable-length integers.

Encodes 64-bit unsigned (ULEB128) and signed (SLEB128) integers into
caller-supplied buffers and decodes them back.

Example usage:
    from nano_leb128 import SLEB128, encode_uleb128, decode_uleb128

    buf = bytearray(10)

    # Compress a value into the buffer
    length = SLEB128(-123456).write_into(buf)

    # Decompress it again
    value, consumed = SLEB128.read_from(buf[:length])
    assert int(value) == -123456

    # Or, when allocating is fine
    data = encode_uleb128(300)          # b"\\xAC\\x02"
    value, offset = decode_uleb128(data)  # (300, 2)
"""

from .buffer import MAX_ENCODED_LEN
from .errors import (
    LEB128Error,
    LEB128EncodeError,
    LEB128DecodeError,
    BufferTooSmall,
    UnexpectedEndOfBuffer,
    Overflow,
)
from .sleb128 import SLEB128, I64_MIN, I64_MAX, encode_sleb128, decode_sleb128
from .stream import (
    read_value,
    write_value,
    read_uleb128,
    read_sleb128,
    write_uleb128,
    write_sleb128,
)
from .uleb128 import ULEB128, U64_MAX, encode_uleb128, decode_uleb128

__version__ = "0.1.0"

__all__ = [
    # Codecs
    "ULEB128",
    "SLEB128",
    "MAX_ENCODED_LEN",
    "U64_MAX",
    "I64_MIN",
    "I64_MAX",
    # Errors
    "LEB128Error",
    "LEB128EncodeError",
    "LEB128DecodeError",
    "BufferTooSmall",
    "UnexpectedEndOfBuffer",
    "Overflow",
    # Bytes helpers
    "encode_uleb128",
    "decode_uleb128",
    "encode_sleb128",
    "decode_sleb128",
    # Streams
    "read_value",
    "write_value",
    "read_uleb128",
    "read_sleb128",
    "write_uleb128",
    "write_sleb128",
]
