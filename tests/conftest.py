# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import pytest

from nano_leb128.buffer import MAX_ENCODED_LEN


@pytest.fixture
def buf():
    """A scratch buffer large enough for any 64-bit value."""
    return bytearray(MAX_ENCODED_LEN)
