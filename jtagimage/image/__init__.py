#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JTAG image assembly.

The image is a plain concatenation of segments; every segment is a 16 byte
:class:`SegmentHeader` followed by the raw content of one part file.
"""

from jtagimage.image.header import EraseMode, SegmentHeader
from jtagimage.image.image import JtagImage
from jtagimage.image.layouts import LAYOUTS, Layout, get_layout
from jtagimage.image.script import parse_script
from jtagimage.image.segment import Segment
from jtagimage.image.size import format_size, parse_size

__all__ = [
    "EraseMode",
    "JtagImage",
    "LAYOUTS",
    "Layout",
    "Segment",
    "SegmentHeader",
    "format_size",
    "get_layout",
    "parse_script",
    "parse_size",
]
