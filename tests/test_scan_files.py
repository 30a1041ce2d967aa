import os

import pytest

from numshift.core import (
    DirectoryAccessError,
    MAX_NUMBER,
    NumberOverflowError,
    parse_filename,
    scan_directory,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("5.txt", (5, "txt")),
        ("33.jpg", (33, "jpg")),
        ("5.tar.gz", (5, "tar.gz")),
        ("0.x", (0, "x")),
        ("007.txt", (7, "txt")),
        ("12..", (12, ".")),
    ],
)
def test_parse_filename_matches(name, expected):
    assert parse_filename(name) == expected


@pytest.mark.parametrize(
    "name",
    ["5", "5.", ".5", "a5.txt", "5a.txt", "-5.txt", "+5.txt", "x.txt", " 5.txt", "٥.txt"],
)
def test_parse_filename_rejects(name):
    assert parse_filename(name) is None


def test_parse_filename_overflow():
    with pytest.raises(NumberOverflowError):
        parse_filename(f"{MAX_NUMBER + 1}.txt")
    assert parse_filename(f"{MAX_NUMBER}.txt") == (MAX_NUMBER, "txt")


def test_scan_selects_only_matching_files(make_files):
    directory = make_files("3.txt", "5.tar.gz", "notes.txt", "7", "x7.txt", "8.md")
    (directory / "9.dir").mkdir()

    files = scan_directory(directory)

    found = sorted((f.number, f.extension, f.name) for f in files)
    assert found == [(3, "txt", "3.txt"), (5, "tar.gz", "5.tar.gz"), (8, "md", "8.md")]
    assert all(f.path.parent == directory for f in files)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_scan_ignores_symlinks(make_files):
    directory = make_files("1.txt")
    try:
        os.symlink(directory / "1.txt", directory / "2.txt")
    except OSError:
        pytest.skip("cannot create symlinks here")

    names = [f.name for f in scan_directory(directory)]
    assert names == ["1.txt"]


def test_scan_does_not_recurse(make_files):
    directory = make_files("1.txt")
    sub = directory / "sub"
    sub.mkdir()
    (sub / "2.txt").write_text("2")

    assert [f.name for f in scan_directory(directory)] == ["1.txt"]


def test_scan_overflow_is_warned_and_dropped(make_files):
    big = f"{MAX_NUMBER + 1}.txt"
    directory = make_files(big, "4.txt")
    warnings = []

    files = scan_directory(directory, warning_callback=warnings.append)

    assert [f.name for f in files] == ["4.txt"]
    assert len(warnings) == 1
    assert big in warnings[0]


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(DirectoryAccessError):
        scan_directory(tmp_path / "missing")


def test_scan_empty_directory(tmp_path):
    assert scan_directory(tmp_path) == []


def test_scan_unreadable_entry_raises(make_files, monkeypatch):
    directory = make_files("1.txt")

    def _denied(item):
        raise PermissionError(13, "Permission denied", str(item))

    monkeypatch.setattr("numshift.core.scan_files.is_regular_file", _denied)

    with pytest.raises(DirectoryAccessError) as excinfo:
        scan_directory(directory)

    assert isinstance(excinfo.value.__cause__, PermissionError)
