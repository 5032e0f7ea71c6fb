"""
Global test configuration and fixtures for the AppSearch flag test suite.

This module provides:
- Pytest collection hooks for automatic test categorization based on file location
- Shared fixtures for writing flag configuration files
"""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, isolated)")
    config.addinivalue_line("markers", "fast: marks tests as fast-running tests")
    config.addinivalue_line("markers", "config: marks tests related to flag configuration")


def pytest_collection_modifyitems(config, items):
    """Automatically add markers to tests based on path and file name."""
    tests_root = Path(__file__).parent
    for item in items:
        try:
            parts = Path(item.fspath).relative_to(tests_root).parts
        except ValueError:
            continue
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)
            item.add_marker(pytest.mark.fast)
        if "config" in Path(item.fspath).stem:
            item.add_marker(pytest.mark.config)


@pytest.fixture
def write_flag_file(tmp_path):
    """Write a flag configuration file and return its path."""

    def _write(content: str, name: str = "flags.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
