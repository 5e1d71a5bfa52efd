"""Shared fixtures for the treewalk test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalk.testing import build_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep or wide trees, excluded by run_tests.py")


@pytest.fixture
def small_tree():
    """Tree used throughout the docs.

    A
    ├── B
    │   └── D
    └── C
    """
    return build_tree(("A", [("B", ["D"]), "C"]))


@pytest.fixture
def wide_tree():
    """Three-level tree with uneven branching.

    R
    ├── A
    │   ├── A1
    │   ├── A2
    │   └── A3
    ├── B
    └── C
        └── C1
            └── C1a
    """
    return build_tree(("R", [
        ("A", ["A1", "A2", "A3"]),
        "B",
        ("C", [("C1", ["C1a"])]),
    ]))
