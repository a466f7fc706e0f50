#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the whole JTAG image."""

import io
from pathlib import Path
from typing import Callable

import pytest

from jtagimage.exceptions import JtagImageFileUnreadable, JtagImageParsingError, JtagImageValueError
from jtagimage.image.header import EraseMode, SegmentHeader
from jtagimage.image.image import JtagImage


def test_bootloader_layout(make_part: Callable[..., str]) -> None:
    """SPL and u-boot.img are placed into their partitions."""
    spl = make_part("SPL", 100)
    uboot = make_part("u-boot.img", 200)
    sink = io.BytesIO()
    image = JtagImage.from_layout([spl, uboot])
    written = image.export(sink)

    data = sink.getvalue()
    assert written == len(data) == 2 * SegmentHeader.SIZE + 300
    records = JtagImage.parse(data)
    assert [record.header for record in records] == [
        SegmentHeader(EraseMode.PARTITION, 0, 100, 0xE00000),
        SegmentHeader(EraseMode.PARTITION, 0xE00000, 200, 0x200000),
    ]
    assert [record.position for record in records] == [0, SegmentHeader.SIZE + 100]
    assert data[SegmentHeader.SIZE : SegmentHeader.SIZE + 100] == Path(spl).read_bytes()
    assert data[2 * SegmentHeader.SIZE + 100 :] == Path(uboot).read_bytes()


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5])
def test_layout_images_ordered(make_part: Callable[..., str], count: int) -> None:
    """Segment offsets in every image never decrease."""
    files = [make_part(f"part{index}", 16 * (index + 1)) for index in range(count)]
    sink = io.BytesIO()
    JtagImage.from_layout(files).export(sink)
    offsets = [record.header.offset for record in JtagImage.parse(sink.getvalue())]
    assert len(offsets) == count
    assert offsets == sorted(offsets)


def test_progress_messages(make_part: Callable[..., str]) -> None:
    """Layout description precedes progress lines of segments."""
    ubi = make_part("rootfs.ubi", 64)
    messages: list[str] = []
    JtagImage.from_layout([ubi]).export(io.BytesIO(), print_func=messages.append)
    assert messages == ["rootfs (erase to end):", f"  emit {ubi}@0x01100000 erase:to-end"]


def test_script_image(make_part: Callable[..., str]) -> None:
    """Scripted image keeps parameter order and discovered data sizes."""
    env = make_part("env", 1024)
    kernel = make_part("uImage", 3000)
    sink = io.BytesIO()
    image = JtagImage.from_script([f"{env}@16M", f"{kernel}@18M-28M"], erase_all_first=True)
    image.export(sink)
    headers = [record.header for record in JtagImage.parse(sink.getvalue())]
    assert headers == [
        SegmentHeader(EraseMode.ALL, 0x1000000, 1024, 0),
        SegmentHeader(EraseMode.NONE, 0x1200000, 3000, 0xA00000),
    ]


def test_script_image_has_no_description(make_part: Callable[..., str]) -> None:
    """Only progress lines are printed for scripted images."""
    messages: list[str] = []
    JtagImage.from_script([f"{make_part('env', 8)}@16M"]).export(
        io.BytesIO(), print_func=messages.append
    )
    assert len(messages) == 1


def test_missing_file_leaves_partial_output(make_part: Callable[..., str], tmp_path) -> None:
    """Segments before the missing file are already written, nothing after it."""
    spl = make_part("SPL", 100)
    sink = io.BytesIO()
    image = JtagImage.from_layout([spl, str(tmp_path / "missing"), make_part("ubi", 10)])
    with pytest.raises(JtagImageFileUnreadable):
        image.export(sink)
    assert len(sink.getvalue()) == SegmentHeader.SIZE + 100


def test_unsupported_layout() -> None:
    """Six files have no layout."""
    with pytest.raises(JtagImageValueError):
        JtagImage.from_layout(["a"] * 6)


def test_image_container() -> None:
    """Image can be iterated and measured."""
    image = JtagImage.from_script(["a@0", "b@1M"])
    assert len(image) == 2
    assert [segment.source for segment in image] == ["a", "b"]
    assert repr(image) == "JtagImage(2 segments)"


def test_parse_empty() -> None:
    """Empty image has no segments."""
    assert JtagImage.parse(b"") == []


def test_parse_truncated_data() -> None:
    """Segment data shorter than declared are reported."""
    data = SegmentHeader(EraseMode.NONE, 0, 100).export() + bytes(50)
    with pytest.raises(JtagImageParsingError, match="truncated"):
        JtagImage.parse(data)


def test_parse_trailing_garbage() -> None:
    """Data after the last segment must be another header."""
    data = SegmentHeader(EraseMode.NONE, 0, 4).export() + bytes(4) + b"junk"
    with pytest.raises(JtagImageParsingError, match="Not enough data"):
        JtagImage.parse(data)
