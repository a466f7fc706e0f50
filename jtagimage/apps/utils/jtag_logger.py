#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Logging setup for the applications with colored console output.

Log records always go to standard error, standard output carries the image.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from jtagimage import JTAGIMAGE_DEBUG_LOG_FILE, JTAGIMAGE_DEBUG_LOGGING_DISABLED, __version__
from jtagimage.exceptions import JtagImageError
from jtagimage.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

try:
    logging_config_file = find_file(
        "logging.yaml", use_cwd=False, search_paths=[os.path.expanduser("~/.jtagimage")]
    )
    logging.config.dictConfig(load_configuration(logging_config_file))
except (JtagImageError, ValueError):
    # no logging config file found
    pass


class ColoredFormatter(logging.Formatter):
    """Logging formatter coloring records by their level.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()

        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Modified format method.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        fmt = self.formats.get(record.levelno)
        formatter = logging.Formatter(fmt)
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install log handler for colored output.

    :param level: logging level, defaults to logging.WARNING
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to the jtagimage logger
    :param create_debug_logger: create rotating debug log file
    """
    level = level or logging.WARNING
    target_logger = logger or logging.getLogger("jtagimage")
    target_logger.setLevel(logging.DEBUG)

    color = True
    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True

    if not create_debug_logger or JTAGIMAGE_DEBUG_LOGGING_DISABLED:
        return
    try:
        for h in target_logger.handlers:
            if (
                isinstance(h, logging.handlers.RotatingFileHandler)
                and h.baseFilename == JTAGIMAGE_DEBUG_LOG_FILE
            ):
                return  # Prevent multiple debug file handlers
        os.makedirs(os.path.dirname(JTAGIMAGE_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            JTAGIMAGE_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        debug_handler.setFormatter(ColoredFormatter(colored=False))
        debug_handler.setLevel(logging.DEBUG)
        target_logger.addHandler(debug_handler)

        starter = f"* JTAG IMAGE DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
        padding = len(starter) - 2
        target_logger.debug("*" * len(starter))
        target_logger.debug(starter)
        # pylint: disable=logging-not-lazy
        target_logger.debug(f"* jtagimage version: {__version__}".ljust(padding) + " *")
        target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
        target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
        target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
        target_logger.debug("*" * len(starter))
    except OSError as e:
        target_logger.warning(f"Failed to initialize debug logging: {str(e)}")
