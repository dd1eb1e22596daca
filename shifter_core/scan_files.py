"""
scan_files.py - Pattern Matching Module

Expands a glob pattern into FileEntry objects and finds leftover staging files
"""

from pathlib import Path
from typing import List
import glob
import os

from .errors import NoMatchError
from .models_fs import FileEntry, DEFAULT_STAGING_PREFIX


def match_pattern(pattern: str, files_only: bool = True) -> List[Path]:
    """
    Expand a glob pattern

    Character classes such as "[0-9]" are supported. Results are sorted so
    the enumeration order is stable between runs.

    Args:
        pattern: Glob pattern
        files_only: Whether to drop directories and other non-files

    Returns:
        Matched paths
    """
    matches = sorted(glob.glob(pattern))
    if files_only:
        matches = [m for m in matches if os.path.isfile(m)]
    return [Path(m) for m in matches]


def expand_pattern(pattern: str, files_only: bool = True) -> List[FileEntry]:
    """
    Expand a glob pattern into file entries

    Args:
        pattern: Glob pattern
        files_only: Whether to drop directories and other non-files

    Returns:
        File entries in enumeration order

    Raises:
        NoMatchError: Nothing matched
    """
    paths = match_pattern(pattern, files_only=files_only)
    if not paths:
        raise NoMatchError(pattern)
    return [FileEntry.from_path(p) for p in paths]


def list_staged_files(directory: Path, prefix: str = DEFAULT_STAGING_PREFIX) -> List[Path]:
    """
    List files left under a staging name in a directory

    Args:
        directory: Directory to inspect
        prefix: Staging prefix

    Returns:
        Staged file paths, sorted
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    return sorted(
        item for item in directory.iterdir()
        if item.is_file() and item.name.startswith(prefix) and len(item.name) > len(prefix)
    )
