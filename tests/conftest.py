#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Pytest configuration and shared test fixtures."""

import os
from typing import Callable

import pytest

os.environ["JTAGIMAGE_DEBUG_LOGGING_DISABLED"] = "True"

from tests.cli_runner import CliRunner  # pylint: disable=wrong-import-position


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def make_part(tmp_path) -> Callable[..., str]:
    """Get factory creating part files in a temporary directory.

    The created file is filled by a repeated pattern derived from its name, so
    two parts of the same size never have the same content.

    :return: Factory taking file name and size, returning path to the created file.
    """

    def factory(name: str, size: int) -> str:
        path = tmp_path / name
        pattern = name.encode() or b"\x00"
        path.write_bytes((pattern * (size // len(pattern) + 1))[:size])
        return str(path)

    return factory
