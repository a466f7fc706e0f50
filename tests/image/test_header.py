#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the segment header and erase modes."""

import pytest

from jtagimage.exceptions import JtagImageParsingError, JtagImageValueError
from jtagimage.image.header import EraseMode, SegmentHeader, encode_u16, encode_u32


def test_header_size() -> None:
    """Header has 2 bytes of magic, 2 bytes of erase mode and 3 * 4 bytes of fields."""
    assert SegmentHeader.SIZE == 16
    assert len(SegmentHeader(EraseMode.ALL, 0, 1).export()) == 16


def test_header_export_exact() -> None:
    """Test the exact binary layout of the header."""
    header = SegmentHeader(EraseMode.PARTITION, 0x00E00000, 0x12345678, 0)
    assert header.export() == bytes.fromhex("4757 0200 0000e000 78563412 00000000")


def test_header_export_part_size() -> None:
    """Part size is stored little-endian after the data size."""
    header = SegmentHeader(EraseMode.ALL, 0, 100, 0xE00000)
    assert header.export() == b"GW" + bytes.fromhex("0000 00000000 64000000 0000e000")


@pytest.mark.parametrize(
    "mode,tag,label",
    [
        (EraseMode.ALL, 0, "all"),
        (EraseMode.NONE, 1, "segment"),
        (EraseMode.PARTITION, 2, "partition"),
        (EraseMode.TO_END, 3, "to-end"),
    ],
)
def test_erase_modes(mode: EraseMode, tag: int, label: str) -> None:
    """Test values and names of erase modes."""
    assert mode.tag == tag
    assert mode.label == label
    assert EraseMode.from_tag(tag) is mode
    assert SegmentHeader(mode, 0, 1).export()[2:4] == bytes([tag, 0])


def test_erase_mode_unknown_label() -> None:
    """Unknown erase modes are printed with their value."""
    assert EraseMode.get_label(7) == "Unknown (7)"
    assert SegmentHeader(7, 0, 1).erase_mode_label == "Unknown (7)"


@pytest.mark.parametrize(
    "value,expected",
    [(0, b"\x00\x00"), (1, b"\x01\x00"), (0x1234, b"\x34\x12"), (0xFFFF, b"\xff\xff")],
)
def test_encode_u16(value: int, expected: bytes) -> None:
    """Test little-endian 16-bit encoding."""
    assert encode_u16(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(0, b"\x00" * 4), (0x1C00000, b"\x00\x00\xc0\x01"), (0xFFFFFFFF, b"\xff" * 4)],
)
def test_encode_u32(value: int, expected: bytes) -> None:
    """Test little-endian 32-bit encoding."""
    assert encode_u32(value) == expected


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_encode_u16_out_of_range(value: int) -> None:
    """Values not fitting into 16 bits are rejected."""
    with pytest.raises(JtagImageValueError):
        encode_u16(value)


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_encode_u32_out_of_range(value: int) -> None:
    """Values not fitting into 32 bits are rejected."""
    with pytest.raises(JtagImageValueError):
        encode_u32(value)


def test_header_offset_out_of_range() -> None:
    """Offset beyond 4GiB cannot be exported."""
    with pytest.raises(JtagImageValueError):
        SegmentHeader(EraseMode.NONE, 0x100000000, 1).export()


def test_header_parse() -> None:
    """Parsed header equals the exported one."""
    header = SegmentHeader(EraseMode.TO_END, 0x1100000, 4096, 0)
    data = b"\xaa" * 3 + header.export()
    parsed = SegmentHeader.parse(data, offset=3)
    assert parsed == header
    assert parsed.erase_mode == EraseMode.TO_END
    assert not parsed.is_bootstream


def test_header_parse_bootstream() -> None:
    """Header with zero data size is a bootstream."""
    parsed = SegmentHeader.parse(SegmentHeader(EraseMode.ALL, 0, 0, 0xE00000).export())
    assert parsed.is_bootstream
    assert parsed.part_size == 0xE00000


def test_header_parse_short() -> None:
    """Too short data cannot be parsed."""
    with pytest.raises(JtagImageParsingError, match="Not enough data"):
        SegmentHeader.parse(b"GW\x00\x00")


def test_header_parse_invalid_magic() -> None:
    """Header must start with GW."""
    with pytest.raises(JtagImageParsingError, match="magic"):
        SegmentHeader.parse(b"WG" + bytes(SegmentHeader.SIZE - 2))


def test_header_str() -> None:
    """Test printable representation of the header."""
    header = SegmentHeader(EraseMode.PARTITION, 0xE00000, 200, 0x200000)
    assert "partition" in str(header)
    assert "0x00E00000" in str(header)
    assert "0x00200000" in str(header)
