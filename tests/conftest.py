"""
Shared fixtures for the numshift test suite.
"""

import os
import sys

# Add project root to sys.path so 'numshift' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


@pytest.fixture
def make_files(tmp_path):
    """Create files inside tmp_path, each holding its own original name."""

    def _make(*names):
        for name in names:
            (tmp_path / name).write_text(name, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def listing(tmp_path):
    """Return the sorted filenames currently in tmp_path."""

    def _listing():
        return sorted(p.name for p in tmp_path.iterdir())

    return _listing
