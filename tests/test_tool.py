# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the leb128_tool command line."""

import pytest
from unittest.mock import patch

import serial

from leb128_tool import main
from nano_leb128.errors import TimeoutError


class TestEncodeCommand:
    """Tests for the encode subcommand."""

    def test_encode_unsigned(self, capsys):
        """Each value is printed with its hex encoding."""
        main(["encode", "300", "0"])
        out = capsys.readouterr().out
        assert "300: ac02 (2 bytes)" in out
        assert "0: 00 (1 bytes)" in out

    def test_encode_signed_negative(self, capsys):
        """Negative values need --signed."""
        main(["encode", "--signed", "-123456"])
        assert "-123456: c0bb78 (3 bytes)" in capsys.readouterr().out

    def test_encode_negative_unsigned_fails(self, capsys):
        """Negative values are rejected for ULEB128."""
        with pytest.raises(SystemExit) as exc:
            main(["encode", "-1"])
        assert exc.value.code == 1
        assert "Error: ULEB128 value out of range" in capsys.readouterr().out


class TestDecodeCommand:
    """Tests for the decode subcommand."""

    def test_decode_sequence(self, capsys):
        """Every value in the hex string is printed."""
        main(["decode", "ac02e58e26"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["300 (2 bytes)", "624485 (3 bytes)"]

    def test_decode_signed(self, capsys):
        """--signed decodes SLEB128."""
        main(["decode", "--signed", "d47d7f"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["-300 (2 bytes)", "-1 (1 bytes)"]

    def test_decode_truncated_fails(self, capsys):
        """Truncated input exits with an error."""
        with pytest.raises(SystemExit) as exc:
            main(["decode", "ac"])
        assert exc.value.code == 1
        assert "unexpected end of buffer" in capsys.readouterr().out

    def test_decode_bad_hex_fails(self, capsys):
        """Invalid hex exits with an error."""
        with pytest.raises(SystemExit):
            main(["decode", "zz"])
        assert capsys.readouterr().out.startswith("Error:")


class TestSerialCommands:
    """Tests for send/receive subcommands."""

    def test_port_required(self, capsys):
        """send without --port fails."""
        with pytest.raises(SystemExit) as exc:
            main(["send", "1"])
        assert exc.value.code == 1
        assert "--port is required" in capsys.readouterr().out

    @patch('leb128_tool.Transport')
    def test_send(self, mock_transport_class, capsys):
        """Values are passed to the transport, which is then closed."""
        transport = mock_transport_class.return_value
        transport.write_values.return_value = 3
        transport.port = "/dev/ttyTEST"

        main(["--port", "/dev/ttyTEST", "send", "--signed", "-1", "64"])

        mock_transport_class.assert_called_once_with("/dev/ttyTEST", 115200, timeout=5.0)
        transport.write_values.assert_called_once_with([-1, 64], signed=True)
        transport.close.assert_called_once()
        assert "Sent 2 values (3 bytes)" in capsys.readouterr().out

    @patch('leb128_tool.Transport')
    def test_receive(self, mock_transport_class, capsys):
        """--count values are read and printed."""
        transport = mock_transport_class.return_value
        transport.read_uleb128.side_effect = [7, 300]

        main(["--port", "/dev/ttyTEST", "receive", "--count", "2"])

        assert capsys.readouterr().out.splitlines() == ["7", "300"]
        transport.close.assert_called_once()

    @pytest.mark.parametrize("count", ["0", "-3"])
    def test_receive_count_must_be_positive(self, count, capsys):
        """--count below 1 is rejected by the parser."""
        with pytest.raises(SystemExit) as exc:
            main(["--port", "/dev/ttyTEST", "receive", "--count", count])
        assert exc.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err

    @patch('leb128_tool.Transport')
    def test_receive_timeout(self, mock_transport_class, capsys):
        """Transport errors exit with status 1."""
        transport = mock_transport_class.return_value
        transport.read_sleb128.side_effect = TimeoutError("Timeout waiting for value")

        with pytest.raises(SystemExit) as exc:
            main(["--port", "/dev/ttyTEST", "receive", "--signed"])
        assert exc.value.code == 1
        assert "Error: Timeout waiting for value" in capsys.readouterr().out
        transport.close.assert_called_once()

    @patch('leb128_tool.Transport')
    def test_open_failure(self, mock_transport_class, capsys):
        """A port that cannot be opened exits with status 1."""
        mock_transport_class.side_effect = serial.SerialException("no such port")

        with pytest.raises(SystemExit) as exc:
            main(["--port", "/dev/ttyNONE", "receive"])
        assert exc.value.code == 1
        assert "Error opening /dev/ttyNONE" in capsys.readouterr().out
