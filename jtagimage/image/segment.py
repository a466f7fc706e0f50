#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Image segment: one part file together with its placement in flash."""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from jtagimage.exceptions import JtagImageValueError
from jtagimage.image.header import EraseMode, SegmentHeader
from jtagimage.utils.misc import get_file_size, read_file_chunks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """Part file to be programmed at given flash offset.

    The data size is not part of the segment, it is taken from the file when
    the segment is emitted.
    """

    source: str
    erase_mode: EraseMode
    offset: int
    part_size: int = 0

    @property
    def end(self) -> Optional[int]:
        """End address of the declared partition, None if the partition size is not declared."""
        return self.offset + self.part_size if self.part_size else None

    def progress_line(self) -> str:
        """Get human readable description of the segment placement."""
        if self.end is None:
            return f"  emit {self.source}@0x{self.offset:08x} erase:{self.erase_mode.label}"
        return (
            f"  emit {self.source}@0x{self.offset:08x}-0x{self.end:08x} "
            f"erase:{self.erase_mode.label}"
        )

    def get_header(self) -> SegmentHeader:
        """Create header of the segment, the data size is read from the source file.

        :raises JtagImageFileUnreadable: Source file does not exist or is not readable.
        :raises JtagImageValueError: Empty source file without partition size.
        :return: Segment header.
        """
        data_size = get_file_size(self.source)
        if data_size == 0 and self.part_size == 0:
            raise JtagImageValueError(
                f"File '{self.source}' is empty and no partition size is declared for it"
            )
        return SegmentHeader(
            erase_mode=self.erase_mode,
            offset=self.offset,
            data_size=data_size,
            part_size=self.part_size,
        )

    def emit(self, sink: BinaryIO, print_func: Optional[Callable[[str], None]] = None) -> int:
        """Write segment header followed by the content of the source file.

        :param sink: Binary stream the image is written into.
        :param print_func: Function receiving the progress line, it must not write into the sink.
        :raises JtagImageFileUnreadable: Source file does not exist or is not readable.
        :return: Number of bytes written into the sink.
        """
        if print_func:
            print_func(self.progress_line())
        header = self.get_header()
        logger.debug(f"Emitting {header} from {self.source}")
        sink.write(header.export())
        written = header.size
        for chunk in read_file_chunks(self.source):
            sink.write(chunk)
            written += len(chunk)
        if written - header.size != header.data_size:
            raise JtagImageValueError(
                f"File '{self.source}' changed while emitting: expected {header.data_size} bytes, "
                f"got {written - header.size}"
            )
        return written
