"""
exec_shift.py - Shift Execution Module

Responsibilities:
- Two-phase execution (first move to a staging name, then to the final name)
- Per-entry error isolation and progress reporting
- dry_run support and JSON execution logs
- Recovery of files left under staging names
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
from datetime import datetime
import json
import os

from .errors import FileSystemError, ShiftError
from .models_fs import FileEntry, RenamePlan, ShiftResult, StagedMove, DEFAULT_STAGING_PREFIX
from .safety_checks import check_rename_op, check_target_free
from .scan_files import list_staged_files


ProgressCallback = Callable[[int, int, str], None]
ErrorCallback = Callable[[ShiftError], None]


class _Progress:
    """Move counter shared by both phases"""

    def __init__(self, total: int, callback: Optional[ProgressCallback]):
        self.completed = 0
        self.total = total
        self.callback = callback

    def step(self, message: str) -> None:
        self.completed += 1
        if self.callback:
            self.callback(self.completed, self.total, message)

    def drop(self) -> None:
        """
        Remove an entry that failed in phase 1 from the total

        Progress events sent before the failure carry the larger total.
        """
        self.total -= 2


def _move(entry: FileEntry, src: Path, dst: Path, phase: int) -> None:
    valid, reason = check_rename_op(src, dst)
    if not valid:
        raise FileSystemError(entry.path, phase, src, dst, reason)

    try:
        os.rename(src, dst)
    except OSError as e:
        raise FileSystemError(entry.path, phase, src, dst, str(e), e) from e


def _fail(
    result: ShiftResult,
    entry: FileEntry,
    error: ShiftError,
    error_callback: Optional[ErrorCallback]
) -> None:
    result.failed.append((entry, error))
    if error_callback:
        error_callback(error)


def stage_entries(
    plan: RenamePlan,
    result: ShiftResult,
    progress: _Progress,
    error_callback: Optional[ErrorCallback] = None
) -> List[StagedMove]:
    """
    Phase 1: move every planned entry to its staging name

    Returns:
        Staging map in processing order
    """
    staged: List[StagedMove] = []
    prefix = plan.options.staging_prefix

    for entry in plan.entries:
        staging = entry.staging_path(prefix)
        try:
            _move(entry, entry.path, staging, phase=1)
        except FileSystemError as e:
            progress.drop()
            _fail(result, entry, e, error_callback)
            continue

        staged.append(StagedMove(entry=entry, staging=staging, final=entry.final_path))
        progress.step(f"Processing: {entry.path}")

    return staged


def _restore(move: StagedMove) -> str:
    """Try to put a staged file back under its original name"""
    original = move.entry.path
    free, _ = check_target_free(original)
    if not free:
        return f"left at {move.staging}"

    try:
        os.rename(move.staging, original)
    except OSError as e:
        return f"left at {move.staging}, restore failed: {e}"
    return "restored"


def finalize_entries(
    staged: List[StagedMove],
    plan: RenamePlan,
    result: ShiftResult,
    progress: _Progress,
    error_callback: Optional[ErrorCallback] = None
) -> None:
    """
    Phase 2: move every staged file to its final name

    A final path that already exists was not freed by this run, so the move
    is refused rather than overwriting it. Failed files are only moved back
    once every other entry has been finalized, so a restored name never
    blocks another entry's destination.
    """
    failures: List[Tuple[StagedMove, FileSystemError]] = []

    for move in staged:
        entry = move.entry
        try:
            _move(entry, move.staging, move.final, phase=2)
        except FileSystemError as e:
            failures.append((move, e))
            progress.step(f"Failed: {entry.path}")
            continue

        result.success.append(move)
        progress.step(f"Renamed: {entry.path} -> {move.final}")

    for move, e in failures:
        if plan.options.restore_on_failure:
            note = _restore(move)
        else:
            note = f"left at {move.staging}"
        error = FileSystemError(move.entry.path, 2, move.staging, move.final, f"{e.reason} ({note})", e.os_error)
        _fail(result, move.entry, error, error_callback)


def execute_shift(
    plan: RenamePlan,
    progress_callback: Optional[ProgressCallback] = None,
    error_callback: Optional[ErrorCallback] = None
) -> ShiftResult:
    """
    Execute a shift plan (two-phase)

    Args:
        plan: Shift plan
        progress_callback: Progress callback (completed, total, message)
        error_callback: Called with every per-entry error as it happens

    Returns:
        Execution result
    """
    options = plan.options
    result = ShiftResult(skipped=list(plan.skipped))

    if not plan.entries:
        return result

    if options.log_dir and not options.dry_run:
        save_plan_log(plan, options.log_dir)

    if options.dry_run:
        total = plan.total_count
        for i, entry in enumerate(plan.entries):
            if progress_callback:
                progress_callback(i + 1, total, f"[Preview] {entry.name} -> {entry.final_name}")
            result.success.append(
                StagedMove(entry=entry, staging=entry.staging_path(options.staging_prefix), final=entry.final_path)
            )
        return result

    progress = _Progress(plan.total_count * 2, progress_callback)
    staged = stage_entries(plan, result, progress, error_callback)
    finalize_entries(staged, plan, result, progress, error_callback)

    if options.log_dir:
        save_result_log(result, options.log_dir)

    return result


def save_plan_log(plan: RenamePlan, log_dir: Path) -> Path:
    """Save execution plan log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"shift_plan_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "shift": plan.shift,
        "total_ops": plan.total_count,
        "operations": [
            {
                "src": str(entry.path),
                "dst": str(entry.final_path),
                "staging": str(entry.staging_path(plan.options.staging_prefix)),
            }
            for entry in plan.entries
        ],
        "skipped": [
            {"src": str(error.path), "shifted": error.shifted}
            for error in plan.skipped
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file


def save_result_log(result: ShiftResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"shift_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "success_count": result.success_count,
        "failed_count": result.failed_count,
        "skipped_count": result.skipped_count,
        "success": [
            {"src": str(move.entry.path), "dst": str(move.final)}
            for move in result.success
        ],
        "failed": [
            {"src": str(entry.path), "error": str(error)}
            for entry, error in result.failed
        ],
        "skipped": [
            {"src": str(error.path), "shifted": error.shifted}
            for error in result.skipped
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file


def restore_staged_files(
    directory: Path,
    prefix: str = DEFAULT_STAGING_PREFIX
) -> Tuple[List[Path], List[Tuple[Path, str]]]:
    """
    Move files left under staging names back to their original names

    Used after a run was interrupted between the two phases.

    Args:
        directory: Directory
        prefix: Staging prefix

    Returns:
        (restored original paths, [(staging path, reason), ...] not restored)
    """
    restored: List[Path] = []
    failed: List[Tuple[Path, str]] = []

    for item in list_staged_files(directory, prefix):
        original = item.parent / item.name[len(prefix):]
        free, reason = check_target_free(original)
        if not free:
            failed.append((item, reason))
            continue
        try:
            os.rename(item, original)
        except OSError as e:
            failed.append((item, str(e)))
            continue
        restored.append(original)

    return restored, failed
