"""
scan_files.py - File Scanning Module

Lists a single directory (non-recursive) and collects files named
NUMBER.EXTENSION
"""

import logging
import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .errors import DirectoryAccessError, NumberOverflowError
from .models_fs import MatchedFile, MAX_NUMBER

logger = logging.getLogger(__name__)

# Whole-name match: ASCII digits, a dot, then anything (greedy, may contain dots)
FILENAME_PATTERN = re.compile(r"([0-9]+)\.(.+)", re.DOTALL)


def parse_filename(name: str) -> Optional[Tuple[int, str]]:
    """
    Split a filename into numeric prefix and extension

    Args:
        name: Filename (no directory part)

    Returns:
        (number, extension), or None if the name does not match

    Raises:
        NumberOverflowError: The digit run is larger than MAX_NUMBER
    """
    match = FILENAME_PATTERN.fullmatch(name)
    if match is None:
        return None

    digits, extension = match.groups()
    number = int(digits)
    if number > MAX_NUMBER:
        raise NumberOverflowError(name, digits)

    return number, extension


def is_regular_file(item: Path) -> bool:
    """Regular file that is not a symlink"""
    return item.is_file() and not item.is_symlink()


def scan_directory(
    directory: Path,
    warning_callback: Optional[Callable[[str], None]] = None
) -> List[MatchedFile]:
    """
    Scan directory for files named NUMBER.EXTENSION

    Args:
        directory: Target directory
        warning_callback: Receives a message for every file dropped
            because its number is out of range

    Returns:
        Matched files, in directory listing order

    Raises:
        DirectoryAccessError: The directory or one of its entries cannot be read
    """
    directory = Path(directory)

    # Only regular files; directories and symlinks are ignored
    try:
        entries = [item for item in directory.iterdir() if is_regular_file(item)]
    except OSError as e:
        raise DirectoryAccessError(directory, str(e)) from e

    results: List[MatchedFile] = []

    for item in entries:
        try:
            parsed = parse_filename(item.name)
        except NumberOverflowError as e:
            message = f"Warning: {e}"
            if warning_callback:
                warning_callback(message)
            else:
                logger.warning(message)
            continue

        if parsed is None:
            continue

        number, extension = parsed
        results.append(MatchedFile(number=number, path=item, extension=extension))

    logger.debug("Scanned %s: %d matching files", directory, len(results))
    return results
