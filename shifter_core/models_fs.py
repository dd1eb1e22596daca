"""
models_fs.py - Core Data Structure Definitions

Contains:
- FileEntry: A matched file split around its trailing integer
- StagedMove: One record of the staging map (phase 1 -> phase 2)
- RenamePlan: Ordered entries to process for one shift
- ShiftOptions: Run configuration
- ShiftResult: Execution outcome
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Tuple

from .errors import RangeOverflowError, ShiftError
from .int_match import split_extension, split_trailing_integer, format_shifted


# 32-bit signed bounds for shifted integers
INT32_MIN = -2147483648
INT32_MAX = 2147483647

DEFAULT_STAGING_PREFIX = ".__tmp_shift__"


def in_bounds(value: int) -> bool:
    """Whether value fits the 32-bit signed range"""
    return INT32_MIN <= value <= INT32_MAX


@dataclass
class FileEntry:
    """Matched file information"""
    path: Path                      # Original path
    directory: Path                 # Parent directory
    name: str                       # Basename (with extension)
    extension: str                  # Extension with dot, "" if none
    name_stem: str                  # Stem without the trailing integer
    int_text: str                   # Trailing integer as written, "" if none
    last_integer: int               # Trailing integer (0 if none)
    had_integer: bool
    shifted_integer: Optional[int] = None

    @classmethod
    def from_path(cls, p: Path) -> "FileEntry":
        """Create FileEntry from Path object"""
        p = Path(p)
        stem, extension = split_extension(p.name)
        trailing = split_trailing_integer(stem)
        return cls(
            path=p,
            directory=p.parent,
            name=p.name,
            extension=extension,
            name_stem=trailing.stem,
            int_text=trailing.text,
            last_integer=trailing.value,
            had_integer=trailing.had_integer,
        )

    def render_name(self, shifted: int) -> str:
        """Filename carrying the given integer in place of the trailing one"""
        return f"{self.name_stem}{format_shifted(self.int_text, self.last_integer, shifted)}{self.extension}"

    @property
    def final_name(self) -> str:
        if self.shifted_integer is None:
            raise ValueError(f"Entry has not been shifted yet: {self.path}")
        return self.render_name(self.shifted_integer)

    @property
    def final_path(self) -> Path:
        return self.directory / self.final_name

    def staging_path(self, prefix: str = DEFAULT_STAGING_PREFIX) -> Path:
        """Temporary path used between the two phases"""
        return self.directory / f"{prefix}{self.name}"


@dataclass
class StagedMove:
    """An entry that reached its staging name"""
    entry: FileEntry
    staging: Path
    final: Path


@dataclass
class ShiftOptions:
    """Run configuration"""
    dry_run: bool = False                       # Preview only, do not actually execute
    log_dir: Optional[Path] = None              # Where to save JSON logs (None disables)
    staging_prefix: str = DEFAULT_STAGING_PREFIX
    files_only: bool = True                     # Ignore directories matched by the pattern
    restore_on_failure: bool = True             # Move back to the original name if phase 2 fails


@dataclass
class RenamePlan:
    """Processing order for one shift"""
    shift: int = 0
    entries: List[FileEntry] = field(default_factory=list)
    skipped: List[RangeOverflowError] = field(default_factory=list)
    options: ShiftOptions = field(default_factory=ShiftOptions)

    @property
    def total_count(self) -> int:
        """Number of files that will be moved"""
        return len(self.entries)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Shift Plan Summary:",
            f"  - Shift: {self.shift}",
            f"  - Files to rename: {self.total_count}",
            f"  - Out of range: {len(self.skipped)}",
        ]
        return "\n".join(lines)


@dataclass
class ShiftResult:
    """Shift execution result"""
    success: List[StagedMove] = field(default_factory=list)
    failed: List[Tuple[FileEntry, ShiftError]] = field(default_factory=list)
    skipped: List[RangeOverflowError] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for entry, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {entry.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)
