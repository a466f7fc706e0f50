#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JTAG image builder for i.MX6 NAND targets.

Wraps bootloader, U-Boot, environment, kernel and UBI parts into a single
binary image. Every part is preceded by a small header telling the JTAG
flashing tool (jtag_usbv4) what to erase and where to program the data.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as jtagimage_version


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version: Version = parse(jtagimage_version)

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)


JTAGIMAGE_VERSION_BASE = version.base_version
JTAGIMAGE_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="jtagimage",
    version=JTAGIMAGE_VERSION_BASE,
)

JTAGIMAGE_DEBUG_LOGGING_DISABLED = value_to_bool(
    os.environ.get("JTAGIMAGE_DEBUG_LOGGING_DISABLED")
)
JTAGIMAGE_DEBUG_LOG_FILE = os.environ.get(
    "JTAGIMAGE_DEBUG_LOG_FILE",
    os.path.join(JTAGIMAGE_PLATFORM_DIRS.user_log_dir, "debug.log"),
)
