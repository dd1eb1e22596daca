"""
errors.py - Error Types

Fatal errors (ArgumentError, NoMatchError) abort the run before any file is
touched. Per-entry errors (RangeOverflowError, FileSystemError) are collected
into the result and never stop the batch.
"""

from pathlib import Path
from typing import Optional


class ShiftError(Exception):
    """Base class for all file shifter errors"""


class ArgumentError(ShiftError):
    """Malformed command-line arguments"""


class NoMatchError(ShiftError):
    """Pattern matched no files"""

    def __init__(self, pattern: str):
        super().__init__(f"No files found matching the pattern {pattern}.")
        self.pattern = pattern


class RangeOverflowError(ShiftError):
    """Shifted integer falls outside the 32-bit signed range"""

    def __init__(self, path: Path, shifted: int):
        super().__init__(
            f"The new integer value for {path} exceeds the 32-bit signed integer limit. Skipping..."
        )
        self.path = path
        self.shifted = shifted


class FileSystemError(ShiftError):
    """A single move failed in phase 1 or phase 2"""

    def __init__(
        self,
        path: Path,
        phase: int,
        src: Path,
        dst: Path,
        reason: str,
        os_error: Optional[OSError] = None
    ):
        super().__init__(f"Phase {phase} failed for {path}: {reason}")
        self.path = path
        self.phase = phase
        self.src = src
        self.dst = dst
        self.reason = reason
        self.os_error = os_error
