#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the fixed positional layouts."""

import pytest

from jtagimage.exceptions import JtagImageValueError
from jtagimage.image.header import EraseMode
from jtagimage.image.layouts import LAYOUTS, get_layout
from jtagimage.image.segment import Segment

FILES = ["f1", "f2", "f3", "f4", "f5"]


@pytest.mark.parametrize(
    "count,expected",
    [
        (1, [(EraseMode.TO_END, 0x1100000, 0)]),
        (2, [(EraseMode.PARTITION, 0, 0xE00000), (EraseMode.PARTITION, 0xE00000, 0x200000)]),
        (
            3,
            [
                (EraseMode.ALL, 0, 0xE00000),
                (EraseMode.NONE, 0xE00000, 0),
                (EraseMode.NONE, 0x1100000, 0),
            ],
        ),
        (
            4,
            [
                (EraseMode.ALL, 0, 0xE00000),
                (EraseMode.NONE, 0xE00000, 0),
                (EraseMode.NONE, 0x1200000, 0),
                (EraseMode.NONE, 0x1C00000, 0),
            ],
        ),
        (
            5,
            [
                (EraseMode.ALL, 0, 0xE00000),
                (EraseMode.NONE, 0xE00000, 0),
                (EraseMode.NONE, 0x1000000, 0),
                (EraseMode.NONE, 0x1200000, 0),
                (EraseMode.NONE, 0x1C00000, 0),
            ],
        ),
    ],
)
def test_layout_segments(count: int, expected: list) -> None:
    """Test segments of every fixed layout."""
    files = FILES[:count]
    segments = get_layout(count).get_segments(files)
    assert segments == [
        Segment(file, mode, offset, part_size)
        for file, (mode, offset, part_size) in zip(files, expected)
    ]


@pytest.mark.parametrize("count", LAYOUTS.keys())
def test_layout_offsets_non_decreasing(count: int) -> None:
    """Segments of a layout never go back and never overlap declared partitions."""
    segments = get_layout(count).get_segments(FILES[:count])
    for previous, current in zip(segments, segments[1:]):
        assert previous.offset <= current.offset
        if previous.end is not None:
            assert previous.end <= current.offset


@pytest.mark.parametrize("count", LAYOUTS.keys())
def test_layout_erase_all_only_first(count: int) -> None:
    """Whole flash may be erased only by the first segment."""
    segments = get_layout(count).get_segments(FILES[:count])
    assert all(segment.erase_mode != EraseMode.ALL for segment in segments[1:])
    if count >= 3:
        assert segments[0].erase_mode == EraseMode.ALL


@pytest.mark.parametrize("count", [0, 6, 10])
def test_unsupported_file_count(count: int) -> None:
    """Only one to five files are supported."""
    with pytest.raises(JtagImageValueError, match="No layout"):
        get_layout(count)


def test_file_count_mismatch() -> None:
    """Layout cannot be used with different number of files."""
    with pytest.raises(JtagImageValueError):
        get_layout(2).get_segments(["SPL"])


def test_layout_usage() -> None:
    """Test usage string of layouts."""
    assert get_layout(1).usage == "<ubi>"
    assert get_layout(2).usage == "<SPL> <u-boot.img>"
    assert get_layout(5).usage == "<SPL> <u-boot.img> <env> <kernel> <ubi>"
