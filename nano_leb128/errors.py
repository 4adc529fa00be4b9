# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the LEB128 codecs and the serial transport.

Decode errors also derive from ValueError, so code that treats malformed
input as a value error keeps working.
"""


class LEB128Error(Exception):
    """Base exception for codec errors."""
    pass


class LEB128EncodeError(LEB128Error):
    """Error while writing an encoded value."""
    pass


class BufferTooSmall(LEB128EncodeError):
    """The destination buffer cannot hold the encoding."""
    pass


class LEB128DecodeError(LEB128Error, ValueError):
    """Error while reading an encoded value."""
    pass


class UnexpectedEndOfBuffer(LEB128DecodeError):
    """Input ended before the terminating byte."""
    pass


class Overflow(LEB128DecodeError):
    """Input encodes a value wider than 64 bits."""
    pass


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for data."""
    pass


class ProtocolError(TransportError):
    """Received data is not a valid encoded value."""
    pass
