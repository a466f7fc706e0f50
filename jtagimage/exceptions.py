#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JTAG image exception classes.

All errors raised by the library derive from :class:`JtagImageError`, so the
command line tools can report them uniformly and exit with a non-zero code.
"""

from typing import Optional

#######################################################################
# # JTAG image Exceptions
#######################################################################


class JtagImageError(Exception):
    """JTAG image base exception.

    :cvar fmt: Default error message format template.
    """

    fmt = "JTAG image: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        return self.fmt.format(description=self.description or "Unknown Error")


class JtagImageValueError(JtagImageError, ValueError):
    """Invalid value passed to the image builder."""


class JtagImageIOError(JtagImageError, IOError):
    """Input/output error while reading parts or writing the image."""


class JtagImageParsingError(JtagImageError):
    """Binary image data cannot be parsed."""


class JtagImageKeyError(JtagImageError, KeyError):
    """Missing enumeration member or dictionary key."""


#######################################################################
# # Image assembly errors
#######################################################################


class JtagImageInvalidSize(JtagImageValueError):
    """Size token cannot be parsed."""


class JtagImageInvalidParameter(JtagImageValueError):
    """Malformed ``file@start[-end]`` parameter."""


class JtagImageFileUnreadable(JtagImageIOError):
    """Source file of a segment does not exist or cannot be read."""
