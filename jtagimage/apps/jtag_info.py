#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI application inspecting JTAG images and the supported fixed layouts."""

import logging
import sys
from typing import Optional

import click
import hexdump
import prettytable

from jtagimage.apps.utils import jtag_logger
from jtagimage.apps.utils.common_cli_options import (
    CommandsTreeGroup,
    jtagimage_apps_common_options,
    jtagimage_binary_option,
)
from jtagimage.apps.utils.utils import catch_jtagimage_error
from jtagimage.image.header import EraseMode
from jtagimage.image.image import JtagImage
from jtagimage.image.layouts import LAYOUTS
from jtagimage.image.size import format_size
from jtagimage.utils.misc import load_binary, size_fmt

logger = logging.getLogger(__name__)


@click.group(name="jtagimage", no_args_is_help=True, cls=CommandsTreeGroup)
@jtagimage_apps_common_options
def main(log_level: Optional[int]) -> None:
    """Utility inspecting JTAG images for i.MX6 NAND targets."""
    jtag_logger.install(level=log_level or logging.WARNING)


@main.command(name="parse", no_args_is_help=True)
@jtagimage_binary_option()
@click.option(
    "-x",
    "--hexdump",
    "use_hexdump",
    is_flag=True,
    default=False,
    help="Print also the raw segment headers.",
)
def parse(binary: str, use_hexdump: bool) -> None:
    """Parse the JTAG image and list its segments."""
    data = load_binary(binary)
    records = JtagImage.parse(data)

    table = prettytable.PrettyTable(
        ["#", "Position", "Erase", "Offset", "End", "Data size", "Part size"]
    )
    table.align = "l"
    for record in records:
        header = record.header
        end = header.offset + (header.part_size if header.is_bootstream else header.data_size)
        table.add_row(
            [
                record.index,
                f"0x{record.position:08X}",
                header.erase_mode_label,
                f"0x{header.offset:08X}",
                f"0x{end:08X}",
                size_fmt(header.data_size),
                f"0x{header.part_size:08X}" if header.part_size else "-",
            ]
        )
    click.echo(table)
    click.echo(f"Segments: {len(records)}, image size: {size_fmt(len(data))}")

    if use_hexdump:
        for record in records:
            click.echo(f"Segment {record.index} header:")
            click.echo(hexdump.hexdump(record.header.export(), result="return"))


@main.command(name="get-layouts")
def get_layouts() -> None:
    """List the fixed layouts used for positional part files."""
    table = prettytable.PrettyTable(["Files", "Description", "Part", "Erase", "Offset", "Part size"])
    table.align = "l"
    for count, layout in LAYOUTS.items():
        for index, slot in enumerate(layout.slots):
            table.add_row(
                [
                    count if index == 0 else "",
                    layout.description if index == 0 else "",
                    slot.name,
                    slot.erase_mode.label,
                    f"0x{slot.offset:08X} ({format_size(slot.offset)})",
                    format_size(slot.part_size) if slot.part_size else "-",
                ]
            )
    click.echo(table)
    click.echo(
        "Erase modes: "
        + ", ".join(f"{mode.label} ({mode.description})" for mode in EraseMode)
    )


@catch_jtagimage_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
