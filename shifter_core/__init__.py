"""
shifter_core - File Shifter Core Module

Provides trailing-integer extraction, shift planning and two-phase execution
"""

from .errors import (
    ShiftError,
    ArgumentError,
    NoMatchError,
    RangeOverflowError,
    FileSystemError,
)

from .models_fs import (
    FileEntry,
    StagedMove,
    RenamePlan,
    ShiftOptions,
    ShiftResult,
    INT32_MIN,
    INT32_MAX,
    DEFAULT_STAGING_PREFIX,
    in_bounds,
)

from .int_match import (
    TrailingInteger,
    split_extension,
    split_trailing_integer,
    format_shifted,
    is_valid_shift,
    is_valid_filename,
)

from .scan_files import (
    match_pattern,
    expand_pattern,
    list_staged_files,
)

from .sort_rules import (
    order_for_shift,
)

from .plan_shift import (
    plan_shift,
    validate_plan,
)

from .exec_shift import (
    execute_shift,
    restore_staged_files,
    save_plan_log,
    save_result_log,
)

from .safety_checks import (
    check_source,
    check_target_free,
    check_rename_op,
)

__all__ = [
    # Errors
    "ShiftError",
    "ArgumentError",
    "NoMatchError",
    "RangeOverflowError",
    "FileSystemError",

    # Data models
    "FileEntry",
    "StagedMove",
    "RenamePlan",
    "ShiftOptions",
    "ShiftResult",
    "INT32_MIN",
    "INT32_MAX",
    "DEFAULT_STAGING_PREFIX",
    "in_bounds",

    # Integer extraction
    "TrailingInteger",
    "split_extension",
    "split_trailing_integer",
    "format_shifted",
    "is_valid_shift",
    "is_valid_filename",

    # Matching
    "match_pattern",
    "expand_pattern",
    "list_staged_files",

    # Ordering
    "order_for_shift",

    # Planning
    "plan_shift",
    "validate_plan",

    # Execution
    "execute_shift",
    "restore_staged_files",
    "save_plan_log",
    "save_result_log",

    # Safety checks
    "check_source",
    "check_target_free",
    "check_rename_op",
]
