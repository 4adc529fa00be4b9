# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial transport for LEB128-encoded integers.

LEB128 values are self-delimiting, so values are written back to back with
no extra framing.
"""

import logging
import time
from typing import Iterable

import serial

from .buffer import MAX_ENCODED_LEN
from .errors import Overflow, ProtocolError, TimeoutError, UnexpectedEndOfBuffer
from .sleb128 import SLEB128
from .stream import Codec, read_value, write_value
from .uleb128 import ULEB128

logger = logging.getLogger(__name__)


class Transport:
    """
    Serial port carrying a stream of LEB128 values.

    Can be used as a context manager:
        with Transport("/dev/ttyACM0") as t:
            t.write_uleb128(300)
            value = t.read_sleb128()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
        """
        self._ser = serial.Serial(port, baudrate, timeout=timeout)
        time.sleep(0.1)  # Let the device settle
        logger.debug("opened %s at %d baud", port, baudrate)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.debug("closed %s", self._ser.port)

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def _send(self, data: bytes):
        """Send raw bytes."""
        self._ser.write(data)
        self._ser.flush()

    def _write(self, codec: Codec) -> int:
        """Send one encoded value and flush."""
        length = write_value(self._ser, codec)
        self._ser.flush()
        logger.debug("sent %s in %d bytes", codec, length)
        return length

    def _read(self, codec_cls) -> int:
        """Receive one value of the given codec."""
        try:
            decoded, length = read_value(codec_cls, self._ser)
        except UnexpectedEndOfBuffer:
            # serial.Serial.read returns b"" once the read timeout expires
            raise TimeoutError("Timeout waiting for value")
        except Overflow as e:
            raise ProtocolError(f"Invalid {codec_cls.__name__} value: {e}") from e

        logger.debug("received %s in %d bytes", decoded, length)
        return decoded.value

    def write_uleb128(self, value: int) -> int:
        """
        Send an unsigned value.

        Returns:
            Number of bytes sent
        """
        return self._write(ULEB128(value))

    def write_sleb128(self, value: int) -> int:
        """
        Send a signed value.

        Returns:
            Number of bytes sent
        """
        return self._write(SLEB128(value))

    def write_values(self, values: Iterable[int], signed: bool = False) -> int:
        """
        Send several values in a single write.

        Args:
            values: Integers to send
            signed: Encode as SLEB128 instead of ULEB128

        Returns:
            Total number of bytes sent
        """
        codec_cls = SLEB128 if signed else ULEB128
        data = bytearray()
        buf = bytearray(MAX_ENCODED_LEN)
        count = 0

        for value in values:
            length = codec_cls(value).write_into(buf)
            data += buf[:length]
            count += 1

        self._send(bytes(data))
        logger.debug("sent %d values in %d bytes", count, len(data))
        return len(data)

    def read_uleb128(self) -> int:
        """
        Receive an unsigned value.

        Raises:
            TimeoutError: If no complete value arrives in time
            ProtocolError: If the received value does not fit in 64 bits
        """
        return self._read(ULEB128)

    def read_sleb128(self) -> int:
        """
        Receive a signed value.

        Raises:
            TimeoutError: If no complete value arrives in time
            ProtocolError: If the received value does not fit in 64 bits
        """
        return self._read(SLEB128)
