from pathlib import Path

import pytest

from numshift.core import MatchedFile, order_for_offset


def _file(number, extension="txt"):
    return MatchedFile(number=number, path=Path(f"{number}.{extension}"), extension=extension)


def _numbers(files):
    return [f.number for f in files]


def test_positive_offset_sorts_descending():
    files = [_file(3), _file(7), _file(5)]
    assert _numbers(order_for_offset(files, 2)) == [7, 5, 3]


def test_zero_offset_sorts_descending():
    files = [_file(1), _file(2)]
    assert _numbers(order_for_offset(files, 0)) == [2, 1]


def test_negative_offset_sorts_ascending():
    files = [_file(5), _file(3), _file(9)]
    assert _numbers(order_for_offset(files, -2)) == [3, 5, 9]


@pytest.mark.parametrize("offset", [4, -4])
def test_ties_broken_by_extension(offset):
    files = [_file(5, "txt"), _file(5, "jpg"), _file(5, "md")]
    ordered = order_for_offset(files, offset)
    assert [f.extension for f in ordered] == ["jpg", "md", "txt"]


def test_input_list_not_modified():
    files = [_file(1), _file(2)]
    order_for_offset(files, 1)
    assert _numbers(files) == [1, 2]


@pytest.mark.parametrize("offset", [-3, -1, 1, 2, 3, 10])
def test_order_never_targets_pending_file(offset):
    numbers = [0, 1, 2, 3, 4, 5, 7, 8, 11, 13, 14]
    ordered = order_for_offset([_file(n) for n in numbers], offset)

    pending = set(numbers)
    for f in ordered:
        pending.discard(f.number)
        target = f.number + offset
        if target >= 0:
            assert target not in pending


@pytest.mark.parametrize("offset", [2, -2])
@pytest.mark.parametrize("names", [["007.txt", "7.txt"], ["7.txt", "007.txt"]])
def test_same_number_and_extension_ordered_by_name(offset, names):
    files = [MatchedFile(number=7, path=Path(name), extension="txt") for name in names]
    ordered = order_for_offset(files, offset)
    assert [f.name for f in ordered] == ["007.txt", "7.txt"]
