#!/usr/bin/env python3
"""
Number Shift Rename - Main Entry

Renames NUMBER.EXTENSION files in the current directory by adding an
offset to the number.

Usage:
    python main.py          # prompts for 'a' (offset) and 'b' (threshold)
    python main.py --help
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from numshift.cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
