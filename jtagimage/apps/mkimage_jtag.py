#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI application creating binary image for i.MX6 NAND targets programmed by jtag_usbv4.

\b
Examples:
  # bootloader only (will not overwrite everything)
  mkimage-jtag SPL u-boot.img > uboot.bin
  # bootloader + ubi (will overwrite everything)
  mkimage-jtag SPL u-boot.img rootfs.ubi > image.bin
  # ubi only (will not overwrite bootloader/env)
  mkimage-jtag rootfs.ubi > image.bin
  # update falcon mode kernel at 18MiB
  mkimage-jtag -s uImage@18M > kernel.bin
  # update SPL and u-boot with full erase
  mkimage-jtag -e SPL@0 u-boot.img@14M > uboot.bin
"""

import functools
import logging
import sys
from typing import BinaryIO, Optional

import click

from jtagimage.apps.utils import jtag_logger
from jtagimage.apps.utils.common_cli_options import (
    jtagimage_apps_common_options,
    jtagimage_output_option,
)
from jtagimage.apps.utils.utils import JtagImageUsageError, catch_jtagimage_error
from jtagimage.image.image import JtagImage
from jtagimage.image.layouts import LAYOUTS

logger = logging.getLogger(__name__)

PROG_NAME = "mkimage-jtag"


def get_usage() -> str:
    """Get usage text listing all supported invocations."""
    layouts = "|".join(f"[{layout.usage}]" for layout in LAYOUTS.values())
    return (
        f"usage: {PROG_NAME} {layouts}\n"
        f"       {PROG_NAME} -s|-e <file>@<start>[-[<end>]]..."
    )


@click.command(name=PROG_NAME, help=__doc__)
@click.option(
    "-s",
    "--script",
    is_flag=True,
    default=False,
    help="Scripted image: FILES are <file>@<start>[-[<end>]] parameters, nothing is erased "
    "unless requested by a parameter.",
)
@click.option(
    "-e",
    "--script-erase-all",
    "erase_all",
    is_flag=True,
    default=False,
    help="Scripted image like -s, the whole flash is erased before the first parameter.",
)
@jtagimage_output_option()
@jtagimage_apps_common_options
@click.argument("files", nargs=-1, metavar="[FILES]...")
def main(
    log_level: Optional[int],
    script: bool,
    erase_all: bool,
    output: BinaryIO,
    files: tuple[str, ...],
) -> None:
    """Create the JTAG image and write it into the output."""
    jtag_logger.install(level=log_level or logging.WARNING)

    if script and erase_all:
        raise JtagImageUsageError(get_usage())
    if script or erase_all:
        if not files:
            logger.warning("No image parameters given, nothing to do")
            return
        image = JtagImage.from_script(files, erase_all_first=erase_all)
    else:
        if len(files) not in LAYOUTS:
            raise JtagImageUsageError(get_usage())
        image = JtagImage.from_layout(files)

    image.export(output, print_func=functools.partial(click.echo, err=True))
    output.flush()


@catch_jtagimage_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
