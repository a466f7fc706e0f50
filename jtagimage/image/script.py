#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Scripted image description.

The image is described by a list of ``file@start[-end]`` parameters:

* ``file@start`` - program file at start; the first parameter erases the whole
  flash if requested, other parameters erase nothing,
* ``file@start-end`` - same as above, the partition size ``end - start`` is
  stored in the header,
* ``file@start-`` - program file at start and erase up to the end of device.

Examples::

    uImage@18M              update falcon mode kernel at 18MiB
    SPL@0 u-boot.img@14M    update SPL and u-boot (with full erase requested)
    env@16M                 overwrite env
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from jtagimage.exceptions import JtagImageInvalidParameter
from jtagimage.image.header import EraseMode
from jtagimage.image.segment import Segment
from jtagimage.image.size import parse_size

logger = logging.getLogger(__name__)


class SegmentRole(str, Enum):
    """Position of the parameter in the script."""

    FIRST = "first"
    MIDDLE = "middle"


def get_position_mode(role: SegmentRole, erase_all_first: bool) -> EraseMode:
    """Get erase mode implied by the parameter position.

    :param role: Position of the parameter.
    :param erase_all_first: Whole flash is erased before the first segment.
    :return: ALL for the first segment if requested, NONE otherwise.
    """
    if role == SegmentRole.FIRST and erase_all_first:
        return EraseMode.ALL
    return EraseMode.NONE


@dataclass(frozen=True)
class BoundedToken:
    """Parameter ``file@start-end``."""

    file: str
    start: int
    end: int
    role: SegmentRole

    @classmethod
    def match(cls, file: str, address: str, role: SegmentRole) -> Optional["BoundedToken"]:
        """Create the token if the address part has the ``start-end`` form."""
        start, sep, end = address.rpartition("-")
        if not sep or not end:
            return None
        return cls(file, parse_size(start), parse_size(end), role)

    def to_segment(self, erase_all_first: bool) -> Segment:
        """Resolve the erase mode and create the segment."""
        if self.end < self.start:
            raise JtagImageInvalidParameter(
                f"invalid parameter: {self.file}@{self.start:#x}-{self.end:#x} ends before it starts"
            )
        return Segment(
            source=self.file,
            erase_mode=get_position_mode(self.role, erase_all_first),
            offset=self.start,
            part_size=self.end - self.start,
        )


@dataclass(frozen=True)
class OpenEndedToken:
    """Parameter ``file@start-``.

    The erase mode does not depend on the position, the role is kept only so that
    all token types can be handled alike.
    """

    file: str
    start: int
    role: SegmentRole

    @classmethod
    def match(cls, file: str, address: str, role: SegmentRole) -> Optional["OpenEndedToken"]:
        """Create the token if the address part has the ``start-`` form."""
        if not address.endswith("-"):
            return None
        return cls(file, parse_size(address[:-1]), role)

    def to_segment(self, erase_all_first: bool) -> Segment:
        """Erase to end, ``erase_all_first`` is ignored even for the first parameter."""
        return Segment(source=self.file, erase_mode=EraseMode.TO_END, offset=self.start)


@dataclass(frozen=True)
class SimpleToken:
    """Parameter ``file@start``."""

    file: str
    start: int
    role: SegmentRole

    @classmethod
    def match(cls, file: str, address: str, role: SegmentRole) -> "SimpleToken":
        """Create the token from the address part."""
        return cls(file, parse_size(address), role)

    def to_segment(self, erase_all_first: bool) -> Segment:
        """Resolve the erase mode and create the segment."""
        return Segment(
            source=self.file,
            erase_mode=get_position_mode(self.role, erase_all_first),
            offset=self.start,
        )


ScriptToken = Union[BoundedToken, OpenEndedToken, SimpleToken]
RANGE_TOKEN_TYPES = (BoundedToken, OpenEndedToken)


def parse_token(token: str, role: SegmentRole) -> ScriptToken:
    """Parse one ``file@start[-end]`` parameter.

    The file name is everything before the last ``@``. Range forms are tried first,
    anything else is a simple start address.

    :param token: Parameter to parse.
    :param role: Position of the parameter in the script.
    :raises JtagImageInvalidParameter: Parameter has no ``@``.
    :raises JtagImageInvalidSize: Start or end is not a valid size.
    :return: Parsed token.
    """
    file, sep, address = token.rpartition("@")
    if not sep:
        raise JtagImageInvalidParameter(f"invalid parameter: {token}")
    for token_type in RANGE_TOKEN_TYPES:
        parsed = token_type.match(file, address, role)
        if parsed is not None:
            return parsed
    return SimpleToken.match(file, address, role)


def parse_script(tokens: Sequence[str], erase_all_first: bool = False) -> list[Segment]:
    """Parse scripted image description into segments.

    All parameters are parsed before any segment is returned, so a malformed
    parameter never results in a partial image.

    :param tokens: Parameters in the form ``file@start[-end]``.
    :param erase_all_first: Erase the whole flash before programming the first segment.
    :raises JtagImageInvalidParameter: Malformed parameter.
    :raises JtagImageInvalidSize: Invalid start or end.
    :return: Segments in the order of parameters.
    """
    segments = []
    for index, token in enumerate(tokens):
        role = SegmentRole.FIRST if index == 0 else SegmentRole.MIDDLE
        parsed = parse_token(token, role)
        logger.debug(f"Parameter {index + 1} '{token}' parsed as {parsed}")
        segments.append(parsed.to_segment(erase_all_first))
    return segments
