"""
plan_shift.py - Shift Plan Generation Module

Responsibilities:
- Order the matched entries
- Apply the shift and drop entries that leave the 32-bit range
- Drop entries whose name would not change
- Output RenamePlan
"""

from pathlib import Path
from typing import List, Dict, Optional
from collections import defaultdict

from .errors import RangeOverflowError
from .models_fs import FileEntry, RenamePlan, ShiftOptions, in_bounds
from .sort_rules import order_for_shift


def plan_shift(
    entries: List[FileEntry],
    shift: int,
    options: Optional[ShiftOptions] = None
) -> RenamePlan:
    """
    Generate a shift plan

    Args:
        entries: Entries in enumeration order
        shift: Signed amount added to every trailing integer
        options: Run options

    Returns:
        Plan with entries in processing order
    """
    if options is None:
        options = ShiftOptions()

    plan = RenamePlan(shift=shift, options=options)

    for entry in order_for_shift(entries, shift):
        shifted = entry.last_integer + shift
        if not in_bounds(shifted):
            plan.skipped.append(RangeOverflowError(entry.path, shifted))
            continue

        entry.shifted_integer = shifted
        if entry.final_name == entry.name:
            continue

        plan.entries.append(entry)

    return plan


def validate_plan(plan: RenamePlan) -> List[str]:
    """
    Validate a shift plan

    Args:
        plan: Shift plan

    Returns:
        Error list
    """
    errors = []

    for entry in plan.entries:
        if not entry.path.exists():
            errors.append(f"Source file does not exist: {entry.path}")

    # Two entries sharing a destination means the second one fails in phase 2
    dst_set: Dict[Path, List[Path]] = defaultdict(list)
    for entry in plan.entries:
        dst_set[entry.final_path].append(entry.path)

    for dst, srcs in dst_set.items():
        if len(srcs) > 1:
            names = ", ".join(str(s) for s in srcs)
            errors.append(f"Multiple files have the same destination: {names} -> {dst}")

    # Files outside the batch already holding a destination name
    sources = {entry.path for entry in plan.entries}
    for dst in dst_set:
        if dst.exists() and dst not in sources:
            errors.append(f"Destination already exists: {dst}")

    return errors
