#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with numeric tag, printable label and description for every member."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self

from jtagimage.exceptions import JtagImageKeyError


@dataclass(frozen=True)
class ImageEnumMember:
    """Single member of an image enumeration."""

    tag: int
    label: str
    description: Optional[str] = None


class ImageEnum(ImageEnumMember, Enum):
    """Enumeration comparable both by its numeric tag and by its label."""

    def __eq__(self, __value: object) -> bool:
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def get_label(cls, tag: int) -> str:
        """Get label of enum member with given tag.

        :param tag: Tag to be used for searching.
        :return: Label of found enum member.
        """
        return cls.from_tag(tag).label

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises JtagImageKeyError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise JtagImageKeyError(f"There is no {cls.__name__} item with tag {tag} defined")


class ImageSoftEnum(ImageEnum):
    """Enumeration returning placeholder labels for unknown tags instead of raising."""

    @classmethod
    def get_label(cls, tag: int) -> str:
        """Get label of enum member with given tag, "Unknown (tag)" if there is none."""
        try:
            return super().get_label(tag)
        except JtagImageKeyError:
            return f"Unknown ({tag})"
