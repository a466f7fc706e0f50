#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Fixed partition layouts selected by the number of part files.

NAND partition map: ``mtdparts=nand:16m(uboot),10m(env),-(rootfs)``, with SPL
at 0, u-boot.img at 14MiB, env at 16MiB, kernel at 18MiB and the UBI rootfs at
17MiB (no kernel) or 28MiB.
"""

from dataclasses import dataclass
from typing import Sequence

from jtagimage.exceptions import JtagImageValueError
from jtagimage.image.header import EraseMode
from jtagimage.image.segment import Segment

SPL_OFFSET = 0
SPL_SIZE = 0xE00000
UBOOT_OFFSET = 0x0E00000
UBOOT_SIZE = 0x0200000
ENV_OFFSET = 0x1000000
ROOTFS_NO_KERNEL_OFFSET = 0x1100000
KERNEL_OFFSET = 0x1200000
ROOTFS_OFFSET = 0x1C00000


@dataclass(frozen=True)
class LayoutSlot:
    """Position of one part file in a fixed layout."""

    name: str
    erase_mode: EraseMode
    offset: int
    part_size: int = 0


@dataclass(frozen=True)
class Layout:
    """Fixed layout of an image built from positional part files."""

    description: str
    slots: tuple[LayoutSlot, ...]

    @property
    def usage(self) -> str:
        """Part files expected by this layout, e.g. ``<SPL> <u-boot.img>``."""
        return " ".join(f"<{slot.name}>" for slot in self.slots)

    def get_segments(self, files: Sequence[str]) -> list[Segment]:
        """Assign part files to slots of the layout.

        :param files: Part files in the order of slots.
        :raises JtagImageValueError: Number of files does not match the layout.
        :return: Segments in the order of slots.
        """
        if len(files) != len(self.slots):
            raise JtagImageValueError(
                f"Layout '{self.description}' requires {len(self.slots)} files, got {len(files)}"
            )
        return [
            Segment(
                source=file,
                erase_mode=slot.erase_mode,
                offset=slot.offset,
                part_size=slot.part_size,
            )
            for file, slot in zip(files, self.slots)
        ]


LAYOUTS: dict[int, Layout] = {
    # ubi (w/o touching bootloader+env)
    1: Layout(
        "rootfs (erase to end)",
        (LayoutSlot("ubi", EraseMode.TO_END, ROOTFS_NO_KERNEL_OFFSET),),
    ),
    # bootloader only, env and ubi are kept
    2: Layout(
        "SPL + u-boot.img (bootloader only)",
        (
            LayoutSlot("SPL", EraseMode.PARTITION, SPL_OFFSET, SPL_SIZE),
            LayoutSlot("u-boot.img", EraseMode.PARTITION, UBOOT_OFFSET, UBOOT_SIZE),
        ),
    ),
    3: Layout(
        "SPL + u-boot.img + ubi (full erase)",
        (
            LayoutSlot("SPL", EraseMode.ALL, SPL_OFFSET, SPL_SIZE),
            LayoutSlot("u-boot.img", EraseMode.NONE, UBOOT_OFFSET),
            LayoutSlot("ubi", EraseMode.NONE, ROOTFS_NO_KERNEL_OFFSET),
        ),
    ),
    4: Layout(
        "SPL + u-boot.img + kernel + ubi (full erase)",
        (
            LayoutSlot("SPL", EraseMode.ALL, SPL_OFFSET, SPL_SIZE),
            LayoutSlot("u-boot.img", EraseMode.NONE, UBOOT_OFFSET),
            LayoutSlot("kernel", EraseMode.NONE, KERNEL_OFFSET),
            LayoutSlot("ubi", EraseMode.NONE, ROOTFS_OFFSET),
        ),
    ),
    5: Layout(
        "SPL + u-boot.img + env + kernel + ubi",
        (
            LayoutSlot("SPL", EraseMode.ALL, SPL_OFFSET, SPL_SIZE),
            LayoutSlot("u-boot.img", EraseMode.NONE, UBOOT_OFFSET),
            LayoutSlot("env", EraseMode.NONE, ENV_OFFSET),
            LayoutSlot("kernel", EraseMode.NONE, KERNEL_OFFSET),
            LayoutSlot("ubi", EraseMode.NONE, ROOTFS_OFFSET),
        ),
    ),
}


def get_layout(file_count: int) -> Layout:
    """Get fixed layout for given number of part files.

    :param file_count: Number of positional part files.
    :raises JtagImageValueError: No layout is defined for that number of files.
    :return: Layout.
    """
    try:
        return LAYOUTS[file_count]
    except KeyError as exc:
        raise JtagImageValueError(
            f"No layout for {file_count} files, supported counts: {', '.join(map(str, LAYOUTS))}"
        ) from exc
