"""
core - Number Shift Rename Core Module

Provides file scanning, ordering, planning and execution of numeric shifts
"""

from .models_fs import (
    MatchedFile,
    RenameOp,
    SkipReason,
    FileDecision,
    ShiftPlan,
    MAX_NUMBER,
)

from .errors import (
    ShiftError,
    InputParseError,
    DirectoryAccessError,
    NumberOverflowError,
    RenameFailure,
)

from .scan_files import (
    FILENAME_PATTERN,
    parse_filename,
    scan_directory,
)

from .sort_rules import (
    get_sort_key,
    order_for_offset,
)

from .plan_rename import (
    decide,
    plan_shift_rename,
)

from .exec_rename import (
    execute_shift,
    rename_one,
    Outcome,
    RenameResult,
)

from .safety_checks import (
    check_rename_op,
)

__all__ = [
    # Data models
    "MatchedFile",
    "RenameOp",
    "SkipReason",
    "FileDecision",
    "ShiftPlan",
    "RenameResult",
    "Outcome",
    "MAX_NUMBER",

    # Errors
    "ShiftError",
    "InputParseError",
    "DirectoryAccessError",
    "NumberOverflowError",
    "RenameFailure",

    # Scanning
    "FILENAME_PATTERN",
    "parse_filename",
    "scan_directory",

    # Sorting
    "get_sort_key",
    "order_for_offset",

    # Planning
    "decide",
    "plan_shift_rename",

    # Execution
    "execute_shift",
    "rename_one",

    # Safety checks
    "check_rename_op",
]
