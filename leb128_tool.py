#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 encode/decode tool, with serial send/receive.

Usage:
    python leb128_tool.py encode 300 624485
    python leb128_tool.py encode --signed -123456
    python leb128_tool.py decode ac02e58e26
    python leb128_tool.py --port /dev/ttyACM0 send 1 2 300
    python leb128_tool.py --port /dev/ttyACM0 receive --count 3 --signed

Requirements:
    pip install pyserial
"""

import argparse
import logging
import sys

try:
    import serial
except ImportError:
    print("Error: pyserial not installed. Run: pip install pyserial")
    sys.exit(1)

from nano_leb128 import (
    LEB128Error,
    decode_sleb128,
    decode_uleb128,
    encode_sleb128,
    encode_uleb128,
)
from nano_leb128.errors import TransportError
from nano_leb128.transport import Transport


def positive_int(text: str) -> int:
    """argparse type for counts of at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def cmd_encode(values, signed: bool):
    """Print the encoding of each value."""
    encode = encode_sleb128 if signed else encode_uleb128
    for value in values:
        data = encode(value)
        print(f"{value}: {data.hex()} ({len(data)} bytes)")


def cmd_decode(hex_data: str, signed: bool):
    """Print every value packed back to back in a hex string."""
    decode = decode_sleb128 if signed else decode_uleb128
    data = bytes.fromhex(hex_data)

    offset = 0
    while offset < len(data):
        value, new_offset = decode(data, offset)
        print(f"{value} ({new_offset - offset} bytes)")
        offset = new_offset


def cmd_send(transport: Transport, values, signed: bool):
    """Send values over the serial port."""
    sent = transport.write_values(values, signed=signed)
    print(f"Sent {len(values)} values ({sent} bytes) to {transport.port}")


def cmd_receive(transport: Transport, count: int, signed: bool):
    """Receive values from the serial port."""
    read = transport.read_sleb128 if signed else transport.read_uleb128
    for _ in range(count):
        print(read())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="LEB128 encode/decode tool"
    )
    parser.add_argument(
        "--port", "-p",
        help="Serial port for send/receive (e.g., /dev/ttyACM0)"
    )
    parser.add_argument("--baudrate", type=int, default=115200,
                        help="Serial baud rate")
    parser.add_argument("--timeout", type=float, default=5.0,
                        help="Serial read timeout in seconds")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("values", type=int, nargs="+", help="Integers to encode")
    encode_parser.add_argument("--signed", "-s", action="store_true",
                               help="Use signed LEB128")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex string")
    decode_parser.add_argument("data", help="Hex-encoded LEB128 values")
    decode_parser.add_argument("--signed", "-s", action="store_true",
                               help="Use signed LEB128")

    # send command
    send_parser = subparsers.add_parser("send", help="Send integers over serial")
    send_parser.add_argument("values", type=int, nargs="+", help="Integers to send")
    send_parser.add_argument("--signed", "-s", action="store_true",
                             help="Use signed LEB128")

    # receive command
    receive_parser = subparsers.add_parser("receive", help="Receive integers over serial")
    receive_parser.add_argument("--count", "-n", type=positive_int, default=1,
                                help="Number of values to receive")
    receive_parser.add_argument("--signed", "-s", action="store_true",
                                help="Use signed LEB128")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "encode":
            cmd_encode(args.values, args.signed)
            return
        if args.command == "decode":
            cmd_decode(args.data, args.signed)
            return
    except (LEB128Error, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not args.port:
        print(f"Error: --port is required for {args.command}")
        sys.exit(1)

    try:
        transport = Transport(args.port, args.baudrate, timeout=args.timeout)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)

    try:
        if args.command == "send":
            cmd_send(transport, args.values, args.signed)
        elif args.command == "receive":
            cmd_receive(transport, args.count, args.signed)
    except (TransportError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        transport.close()


if __name__ == "__main__":
    main()
