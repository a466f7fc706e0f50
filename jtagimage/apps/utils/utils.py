#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Application utilities: usage error and error reporting."""

import logging
import sys
from functools import wraps
from typing import Any, Callable

import click

from jtagimage import JTAGIMAGE_DEBUG_LOG_FILE, JTAGIMAGE_DEBUG_LOGGING_DISABLED
from jtagimage.exceptions import JtagImageError

logger = logging.getLogger(__name__)


class JtagImageUsageError(JtagImageError):
    """Wrong command line usage, the usage text is the description.

    :cvar fmt: Format string template for error message display.
    :cvar error_code: Exit code passed to OS.
    """

    fmt = "{description}"
    error_code = 1


def catch_jtagimage_error(function: Callable) -> Callable:
    """Catch and report exceptions raised by the application.

    * JtagImageUsageError: usage printed, exit code 1
    * JtagImageError, AssertionError: message printed, exit code 2
    * anything else: message printed, exit code 3

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except JtagImageUsageError as usage_exc:
            click.echo(str(usage_exc), err=True)
            sys.exit(usage_exc.error_code)
        except (AssertionError, JtagImageError) as lib_exc:
            click.echo(f"{lib_exc.__class__.__name__}: {lib_exc}", err=True)
            logger.debug(str(lib_exc), exc_info=True)
            if not JTAGIMAGE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {JTAGIMAGE_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not JTAGIMAGE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {JTAGIMAGE_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(3)

    return wrapper
