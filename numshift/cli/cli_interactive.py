"""
cli_interactive.py - Interactive CLI

Prompts for the offset 'a' and the threshold 'b', then shifts every
NUMBER.EXTENSION file in the working directory
"""

import re
import sys
from pathlib import Path
from typing import Optional

from ..core import (
    scan_directory, plan_shift_rename, execute_shift,
    InputParseError, DirectoryAccessError, Outcome, MAX_NUMBER
)

MIN_INPUT = -MAX_NUMBER - 1
MAX_INPUT = MAX_NUMBER

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def print_intro():
    """Explain what the program is about to do"""
    print("This program renames files in the current directory.")
    print("It targets files named like 'NUMBER.EXTENSION' (e.g., 5.txt, 33.jpg).")
    print("It will add your input number 'a' to the numeric part of these filenames.")
    print("For example, if 'a' is 2, 5.txt becomes 7.txt.")
    print("If 'a' is -2, 5.txt becomes 3.txt (files with new negative numbers will be skipped).")
    print("You will also enter a number 'b'. Only files with an original number >= 'b' will be renamed.")
    print()


def parse_int(raw: str, label: str) -> int:
    """
    Parse a signed integer typed by the user

    Args:
        raw: Raw input line
        label: Name of the value, used in the error message

    Returns:
        Parsed integer

    Raises:
        InputParseError: Not an integer, or outside the signed 32-bit range
    """
    text = raw.strip()
    if not INT_PATTERN.fullmatch(text):
        raise InputParseError(label, raw)

    value = int(text)
    if value < MIN_INPUT or value > MAX_INPUT:
        raise InputParseError(label, raw)
    return value


def read_int(prompt: str, label: str) -> int:
    """Prompt once for an integer; EOF counts as invalid input"""
    try:
        raw = input(prompt)
    except EOFError:
        raise InputParseError(label, "") from None
    return parse_int(raw, label)


def pause_before_exit():
    """Keep a console window open until Enter is pressed"""
    if not sys.stdin.isatty():
        return
    try:
        input("Press Enter to exit.")
    except EOFError:
        pass


def report_progress(current: int, total: int, outcome: Outcome, message: str):
    """Print one line per processed file"""
    if outcome is Outcome.FAILED:
        print(message, file=sys.stderr)
    else:
        print(message)


def interactive_mode(directory: Optional[Path] = None) -> int:
    """
    Interactive mode main flow

    Args:
        directory: Directory to process (defaults to current working directory)

    Returns:
        Exit code
    """
    print_header("Number Shift Rename")
    print_intro()

    try:
        offset = read_int("Enter an integer 'a' (the number to add for renaming): ", "a")
        threshold = read_int("Enter an integer 'b' (the minimum original number to rename): ", "b")
    except InputParseError as e:
        print(f"\n{e}. Please enter an integer.", file=sys.stderr)
        return 1

    directory = Path.cwd() if directory is None else Path(directory)
    print(f"Searching for files in: {directory}")

    try:
        files = scan_directory(
            directory,
            warning_callback=lambda msg: print(msg, file=sys.stderr),
        )
    except DirectoryAccessError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not files:
        print("No files matching 'NUMBER.EXTENSION' found in the current directory.")
        return 0

    print(f"Found {len(files)} files")

    plan = plan_shift_rename(files, offset=offset, threshold=threshold)
    if plan.descending:
        print("Sorting files from highest original number to lowest for renaming...")
    else:
        print("Sorting files from lowest original number to highest for renaming...")

    print()
    print(plan.summary())

    print("\nAttempting to rename files:")
    print("-" * 70)
    result = execute_shift(plan, progress_callback=report_progress)
    print("-" * 70)

    print()
    print(result.summary())
    print("\nRenaming process complete.")

    pause_before_exit()
    return 0


if __name__ == "__main__":
    sys.exit(interactive_mode())
