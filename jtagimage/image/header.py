#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Segment header.

Every segment of the image starts with this little-endian structure::

    u8[2] magic       "GW"
    u16   erase_mode  see EraseMode
    u32   offset      byte offset in flash (logical) to program the data
    u32   data_size   byte size of the data following the header
    u32   part_size   size of the partition, used only for bootstream (data_size == 0)

Offset must align with a flash block boundary if erasing a partition or to the
end of device, otherwise with a flash page boundary. The flashing tool checks
that, the header does not.
"""

from struct import calcsize, pack, unpack_from
from struct import error as StructError
from typing import Union

from jtagimage.exceptions import JtagImageParsingError, JtagImageValueError
from jtagimage.utils.image_enum import ImageSoftEnum

########################################################################################################################
# Enums
########################################################################################################################


class EraseMode(ImageSoftEnum):
    """Erase operation performed by the flashing tool before programming a segment."""

    ALL = (0, "all", "Erase entire flash (first segment only)")
    NONE = (1, "segment", "Perform no erase")
    PARTITION = (2, "partition", "Erase only this partition")
    TO_END = (3, "to-end", "Erase from this segment to the end of device")


########################################################################################################################
# Encoders
########################################################################################################################


def encode_u16(value: int) -> bytes:
    """Encode value as little-endian unsigned 16-bit integer.

    :param value: Value to encode.
    :raises JtagImageValueError: Value does not fit into 16 bits.
    :return: Two bytes.
    """
    try:
        return pack("<H", value)
    except StructError as exc:
        raise JtagImageValueError(f"Value {value} does not fit into u16") from exc


def encode_u32(value: int) -> bytes:
    """Encode value as little-endian unsigned 32-bit integer.

    :param value: Value to encode.
    :raises JtagImageValueError: Value does not fit into 32 bits.
    :return: Four bytes.
    """
    try:
        return pack("<I", value)
    except StructError as exc:
        raise JtagImageValueError(f"Value {value:#x} does not fit into u32") from exc


########################################################################################################################
# Classes
########################################################################################################################


class SegmentHeader:
    """Header preceding data of every segment."""

    MAGIC = b"GW"
    FORMAT = "<2sHIII"
    SIZE = calcsize(FORMAT)

    def __init__(
        self,
        erase_mode: Union[EraseMode, int],
        offset: int,
        data_size: int,
        part_size: int = 0,
    ) -> None:
        """Constructor.

        :param erase_mode: erase mode, unknown numeric values are kept as they are
        :param offset: byte offset in flash where the data are programmed
        :param data_size: size of the data following the header
        :param part_size: size of the partition, zero if not declared
        """
        self.erase_mode: int = erase_mode.tag if isinstance(erase_mode, EraseMode) else erase_mode
        self.offset = offset
        self.data_size = data_size
        self.part_size = part_size

    @property
    def size(self) -> int:
        """Header size in bytes."""
        return self.SIZE

    @property
    def erase_mode_label(self) -> str:
        """Printable name of the erase mode."""
        return EraseMode.get_label(self.erase_mode)

    @property
    def is_bootstream(self) -> bool:
        """Segment is a bootstream, the partition size is authoritative."""
        return self.data_size == 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.erase_mode}, {self.offset:#x}, "
            f"{self.data_size}, {self.part_size:#x})"
        )

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__} <ERASE:{self.erase_mode_label}, OFFSET:0x{self.offset:08X}, "
            f"DSIZE:{self.data_size}B, PSIZE:0x{self.part_size:08X}>"
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and vars(other) == vars(self)

    def export(self) -> bytes:
        """Binary representation of the header."""
        return (
            self.MAGIC
            + encode_u16(self.erase_mode)
            + encode_u32(self.offset)
            + encode_u32(self.data_size)
            + encode_u32(self.part_size)
        )

    @classmethod
    def parse(cls, data: bytes, offset: int = 0) -> "SegmentHeader":
        """Parse header.

        :param data: Raw data as bytes or bytearray
        :param offset: Offset of the header in input data
        :raises JtagImageParsingError: Not enough data or invalid magic
        :return: SegmentHeader object
        """
        if len(data) - offset < cls.SIZE:
            raise JtagImageParsingError(
                f"Not enough data for segment header at offset {offset:#x}: "
                f"{max(len(data) - offset, 0)} < {cls.SIZE} bytes"
            )
        magic, erase_mode, flash_offset, data_size, part_size = unpack_from(
            cls.FORMAT, data, offset
        )
        if magic != cls.MAGIC:
            raise JtagImageParsingError(
                f"Invalid segment header magic at offset {offset:#x}: {magic!r}, expected {cls.MAGIC!r}"
            )
        return cls(erase_mode, flash_offset, data_size, part_size)
