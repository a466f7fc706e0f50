#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Human readable size tokens.

Sizes are given either as decimal or ``0x`` prefixed hexadecimal numbers with
an optional binary multiplier suffix: ``K``, ``M`` or ``G`` (case-insensitive),
each optionally followed by ``i``, ``B`` or ``iB``. So ``16M``, ``16MiB``,
``16mb`` and ``0x10M`` all stand for 16 MiB.
"""

import re

from jtagimage.exceptions import JtagImageInvalidSize

# Suffixes ordered by multiplier; the empty one must stay first so that bare
# numbers are never interpreted with a multiplier.
SIZE_SUFFIXES = ("", "K", "M", "G")


def _size_patterns() -> list[tuple[re.Pattern, int, int]]:
    patterns = []
    multiplier = 1
    for suffix in SIZE_SUFFIXES:
        patterns.append(
            (re.compile(rf"([0-9]+)(?:{suffix}i?B?)?", re.IGNORECASE), 10, multiplier)
        )
        patterns.append(
            (re.compile(rf"0x([0-9a-f]+)(?:{suffix}i?B?)?", re.IGNORECASE), 16, multiplier)
        )
        multiplier *= 1024
    return patterns


_PATTERNS = _size_patterns()


def parse_size(token: str) -> int:
    """Parse size token into number of bytes.

    Patterns are tried from the smallest multiplier up, decimal before
    hexadecimal, and the first match wins.

    :param token: Size token, e.g. ``1024``, ``0x400``, ``14M`` or ``0x1MiB``.
    :raises JtagImageInvalidSize: Token is not a valid size.
    :return: Size in bytes.
    """
    for pattern, base, multiplier in _PATTERNS:
        match = pattern.fullmatch(token)
        if match:
            return int(match.group(1), base) * multiplier
    raise JtagImageInvalidSize(f"invalid size: {token}")


def format_size(value: int) -> str:
    """Format byte count with the largest binary suffix dividing it exactly.

    :param value: Size in bytes.
    :return: Size token accepted by :func:`parse_size`, e.g. ``14M``.
    """
    if value:
        for exponent in range(len(SIZE_SUFFIXES) - 1, 0, -1):
            multiplier = 1024**exponent
            if value % multiplier == 0:
                return f"{value // multiplier}{SIZE_SUFFIXES[exponent]}"
    return str(value)
