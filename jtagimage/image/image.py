#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JTAG image built from ordered segments.

The image is streamed into the sink segment by segment and is not buffered;
when emitting fails, the data already written must be discarded by the caller.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterable, Iterator, Optional, Sequence

from jtagimage.exceptions import JtagImageParsingError
from jtagimage.image.header import SegmentHeader
from jtagimage.image.layouts import get_layout
from jtagimage.image.script import parse_script
from jtagimage.image.segment import Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageRecord:
    """Segment found in an existing image."""

    index: int
    position: int
    header: SegmentHeader

    @property
    def data_position(self) -> int:
        """Position of the segment data in the image."""
        return self.position + self.header.size


class JtagImage:
    """Image for the JTAG flashing tool."""

    def __init__(self, segments: Iterable[Segment], description: Optional[str] = None) -> None:
        """Constructor.

        :param segments: Segments in the order they are programmed
        :param description: Human readable description of the image content
        """
        self.segments = list(segments)
        self.description = description

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} segments)"

    @classmethod
    def from_layout(cls, files: Sequence[str]) -> "JtagImage":
        """Create image from positional part files using the fixed layout.

        :param files: One to five part files.
        :raises JtagImageValueError: No layout exists for that number of files.
        :return: JTAG image.
        """
        layout = get_layout(len(files))
        return cls(layout.get_segments(files), description=f"{layout.description}:")

    @classmethod
    def from_script(cls, tokens: Sequence[str], erase_all_first: bool = False) -> "JtagImage":
        """Create image from ``file@start[-end]`` parameters.

        :param tokens: Image parameters.
        :param erase_all_first: Erase the whole flash before the first segment.
        :return: JTAG image.
        """
        return cls(parse_script(tokens, erase_all_first=erase_all_first))

    def export(self, sink: BinaryIO, print_func: Optional[Callable[[str], None]] = None) -> int:
        """Write the image into the sink.

        :param sink: Binary stream the image is written into.
        :param print_func: Function receiving progress messages.
        :raises JtagImageFileUnreadable: Some part file does not exist or is not readable.
        :return: Number of bytes written.
        """
        if print_func and self.description:
            print_func(self.description)
        written = 0
        for segment in self.segments:
            written += segment.emit(sink, print_func=print_func)
        logger.info(f"Image with {len(self)} segments written, {written} bytes")
        return written

    @staticmethod
    def parse(data: bytes) -> list[ImageRecord]:
        """Walk through existing image and parse all segment headers.

        :param data: Image data.
        :raises JtagImageParsingError: Invalid header or truncated segment data.
        :return: Records of all segments.
        """
        records = []
        position = 0
        while position < len(data):
            header = SegmentHeader.parse(data, position)
            record = ImageRecord(index=len(records), position=position, header=header)
            end = record.data_position + header.data_size
            if end > len(data):
                raise JtagImageParsingError(
                    f"Segment {record.index} at {position:#x} is truncated: "
                    f"{header.data_size} bytes declared, {len(data) - record.data_position} available"
                )
            logger.debug(f"Segment {record.index} at {position:#x}: {header}")
            records.append(record)
            position = end
        return records
