"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Make the source tree importable when the package is not installed.
_src_root = str(Path(__file__).resolve().parent.parent / "pysrc")
if _src_root not in sys.path:
    sys.path.insert(0, _src_root)


@pytest.fixture
def reference_inputs():
    """Moderate indoor conditions used across the two-node tests."""
    return {"tdb": 25.0, "tr": 25.0, "v": 0.3, "rh": 50.0, "met": 1.2, "clo": 0.5}


@pytest.fixture
def warm_inputs():
    """Warm, moderately active conditions (second batch reference case)."""
    return {"tdb": 30.0, "tr": 35.0, "v": 0.5, "rh": 60.0, "met": 1.5, "clo": 0.3}
