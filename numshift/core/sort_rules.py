"""
sort_rules.py - Sorting Rules Module

Orders matched files so that applying the shift never renames a file onto
one that is still waiting to be processed
"""

from typing import Callable, List, Tuple

from .models_fs import MatchedFile


def get_sort_key(offset: int) -> Callable[[MatchedFile], Tuple[int, str, str]]:
    """
    Get sort key function for an offset

    Args:
        offset: Offset added to every number

    Returns:
        Sort key function: number descending when offset >= 0, ascending
        otherwise; ties broken by extension, then by
        original filename, both ascending
    """
    if offset >= 0:
        return lambda f: (-f.number, f.extension, f.name)
    return lambda f: (f.number, f.extension, f.name)


def order_for_offset(files: List[MatchedFile], offset: int) -> List[MatchedFile]:
    """
    Sort files into collision-free processing order

    Args:
        files: Matched files
        offset: Offset added to every number

    Returns:
        Sorted file list (new list)
    """
    return sorted(files, key=get_sort_key(offset))
