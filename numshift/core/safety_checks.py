"""
safety_checks.py - Safety Check Module

Checks run right before each rename
"""

import os
from pathlib import Path
from typing import Optional, Tuple


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    # Source may have vanished since the scan
    if not src.exists():
        return False, f"Source file does not exist: {src}"

    if src.is_symlink() or not src.is_file():
        return False, f"Source path is not a regular file: {src}"

    # Never overwrite; lexists also catches dangling symlinks
    if os.path.lexists(dst):
        return False, f"Target already exists: {dst}"

    return True, None
