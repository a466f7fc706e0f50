#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous file and formatting helpers.

Covers loading of binary and configuration files, chunked streaming of the
image parts and human readable formatting of sizes.
"""

import json
import logging
import os
from typing import Callable, Iterator, Optional, Union

import yaml

from jtagimage.exceptions import JtagImageError, JtagImageFileUnreadable

logger = logging.getLogger(__name__)

# Chunk used when copying part files into the image
COPY_CHUNK_SIZE = 64 * 1024


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def _find_path(
    path: str,
    check_func: Callable[[str], bool],
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
) -> str:
    """Find and return the full path to a file or directory.

    Search paths take precedence over current working directory.

    :param path: File name, part of file path or full path to search for.
    :param check_func: Function to validate if the found path exists and meets criteria.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Full absolute path to the found file.
    :raises JtagImageError: File not found in any of the searched locations.
    """
    path = path.replace("\\", "/")

    if os.path.isabs(path):
        if not check_func(path):
            raise JtagImageError(f"Path '{path}' not found")
        return path
    for dir_candidate in search_paths or []:
        if not dir_candidate:
            continue
        path_candidate = get_abs_path(path, base_dir=dir_candidate.replace("\\", "/"))
        if check_func(path_candidate):
            return path_candidate
    if use_cwd and check_func(path):
        return get_abs_path(path)
    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    searched_in.extend(filter(None, search_paths or []))
    searched_in = [s.replace("\\", "/") for s in searched_in]
    raise JtagImageError(f"Path '{path}' not found, Searched in: {', '.join(searched_in)}")


def find_file(
    file_path: str, use_cwd: bool = True, search_paths: Optional[list[str]] = None
) -> str:
    """Find file in filesystem, trying the search paths first and then the CWD.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Full absolute path to the found file.
    :raises JtagImageError: File not found in any of the search locations.
    """
    return _find_path(
        path=file_path, check_func=os.path.isfile, use_cwd=use_cwd, search_paths=search_paths
    )


def load_file(
    path: str, mode: str = "r", search_paths: Optional[list[str]] = None
) -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    with open(path, mode, encoding=encoding) as f:
        return f.read()


def load_binary(path: str, search_paths: Optional[list[str]] = None) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb", search_paths=search_paths)
    assert isinstance(data, bytes)
    return data


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r", search_paths=search_paths)
    assert isinstance(text, str)
    return text


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    The content is parsed as JSON first, YAML is used as a fallback.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises JtagImageError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise JtagImageError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise JtagImageError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise JtagImageError(f"Invalid configuration file: {path}")

    return config_data


def get_file_size(path: str) -> int:
    """Get size of a readable regular file.

    :param path: Path to the file.
    :raises JtagImageFileUnreadable: Path is empty, missing, not a file or not readable.
    :return: Size of the file in bytes.
    """
    if not path or not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise JtagImageFileUnreadable(f"invalid file '{path}'")
    try:
        return os.path.getsize(path)
    except OSError as exc:
        raise JtagImageFileUnreadable(f"invalid file '{path}': {exc}") from exc


def read_file_chunks(path: str, chunk_size: int = COPY_CHUNK_SIZE) -> Iterator[bytes]:
    """Read file content in chunks.

    The file handle is closed once the generator is exhausted or closed.

    :param path: Path to the file.
    :param chunk_size: Maximal size of one chunk.
    :raises JtagImageFileUnreadable: File cannot be opened or read.
    :return: Generator of file chunks.
    """
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    return
                yield chunk
    except OSError as exc:
        raise JtagImageFileUnreadable(f"invalid file '{path}': {exc}") from exc


def size_fmt(num: Union[float, int], use_kibibyte: bool = True) -> str:
    """Format byte size into human-readable string representation.

    :param num: The byte size value to format.
    :param use_kibibyte: If True, use binary prefixes (1024-based) with 'iB' suffix,
                         if False, use decimal prefixes (1000-based) with 'B' suffix.
    :return: Formatted size string with value and unit (e.g., "1.5 MiB", "1024 B").
    """
    base, suffix = [(1000.0, "B"), (1024.0, "iB")][use_kibibyte]
    i = "B"
    for i in ["B"] + [i + suffix for i in list("kMGTP")]:
        if num < base:
            break
        num /= base

    return f"{int(num)} {i}" if i == "B" else f"{num:3.1f} {i}"
