"""
safety_checks.py - Safety Check Module

Checks run right before each move. A failed check becomes a FileSystemError
for that entry only.
"""

from pathlib import Path
from typing import Tuple, Optional
import os

from .int_match import is_valid_filename


def check_source(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that a move source is still an existing file

    Args:
        path: Path to check

    Returns:
        (is_valid, error_reason)
    """
    if not path.exists():
        return False, f"Source file does not exist: {path}"
    if not path.is_file():
        return False, f"Source path is not a file: {path}"
    return True, None


def check_target_free(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that nothing occupies a move target

    os.rename silently replaces an existing file on POSIX, so this is the
    only thing standing between a name clash and lost data.

    Args:
        path: Path to check

    Returns:
        (is_free, error_reason)
    """
    if os.path.lexists(path):
        return False, f"Destination already exists: {path}"
    return True, None


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the directory holding path is writable

    Args:
        path: Path to check

    Returns:
        (is_writable, error_reason)
    """
    parent = path.parent
    if not parent.exists():
        return False, f"Parent directory does not exist: {parent}"
    if not os.access(parent, os.W_OK):
        return False, f"Directory is not writable: {parent}"
    return True, None


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single move is safe

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    for valid, error in (
        check_source(src),
        is_valid_filename(dst.name),
        check_target_free(dst),
        check_writable(src),
    ):
        if not valid:
            return False, error

    return True, None
