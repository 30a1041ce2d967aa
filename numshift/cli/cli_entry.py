"""
cli_entry.py - CLI Entry Point

The only inputs are the two integers entered interactively; the parser
exists to provide --help
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cli_interactive import interactive_mode


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="numshift",
        description="Shift the numeric part of NUMBER.EXTENSION files in the current directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
You will be prompted for:
  a  offset added to each number (may be negative)
  b  minimum original number to rename

Example:
  directory 3.txt 5.txt 7.txt, a=2, b=0  ->  5.txt 7.txt 9.txt
"""
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    return interactive_mode()


if __name__ == "__main__":
    sys.exit(main())
