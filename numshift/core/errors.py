"""
errors.py - Exception Definitions

Fatal errors (abort the run):
- InputParseError: offset/threshold is not an integer
- DirectoryAccessError: working directory cannot be listed

Per-file errors (reported, batch continues):
- NumberOverflowError: numeric prefix out of range
- RenameFailure: rename rejected by the filesystem
"""

from pathlib import Path


class ShiftError(Exception):
    """Base class for all numshift errors"""


class InputParseError(ShiftError):
    """Raised when user input is not a valid integer"""

    def __init__(self, label: str, raw: str):
        self.label = label
        self.raw = raw
        super().__init__(f"Invalid input for '{label}': {raw!r} is not an integer")


class DirectoryAccessError(ShiftError):
    """Raised when the target directory cannot be enumerated"""

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Error accessing directory {directory}: {reason}")


class NumberOverflowError(ShiftError):
    """Raised when the digit run of a filename does not fit the number range"""

    def __init__(self, filename: str, digits: str):
        self.filename = filename
        self.digits = digits
        super().__init__(f"Number part of '{filename}' is out of range")


class RenameFailure(ShiftError):
    """Raised when a single rename is rejected"""

    def __init__(self, src: Path, dst: Path, reason: str):
        self.src = src
        self.dst = dst
        self.reason = reason
        super().__init__(f"Error renaming '{src.name}' to '{dst.name}': {reason}")
