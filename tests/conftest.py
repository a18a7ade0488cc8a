"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the classattr test suite.
"""

import logging
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from classattr import ClassRegistry, Hierarchy, Settings

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (threads, filesystem)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line("markers", "slow: Tests that take >1 second to run")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset the library's parent logger before and after each test.

    Tests that change its level or disable it must not leak into others.
    """
    lg = logging.getLogger("classattr")
    original_level = lg.level
    original_disabled = lg.disabled

    yield

    lg.setLevel(original_level)
    lg.disabled = original_disabled


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="classattr-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def hierarchy() -> Hierarchy:
    """
    Provide a hierarchy with a Base root and two children.

        Base
        |-- Derived
        `-- Sibling
    """
    h = Hierarchy("test")
    h.define("Base")
    h.define("Derived", parent="Base")
    h.define("Sibling", parent="Base")
    return h


@pytest.fixture
def lenient_hierarchy() -> Hierarchy:
    """Same shape as `hierarchy`, but undeclared names resolve to None."""
    h = Hierarchy("lenient", Settings(strict=False))
    h.define("Base")
    h.define("Derived", parent="Base")
    h.define("Sibling", parent="Base")
    return h


@pytest.fixture
def registry() -> ClassRegistry:
    """Provide a private class registry so tests do not share class nodes."""
    return ClassRegistry()


@pytest.fixture
def sample_document() -> dict:
    """
    Provide a sample hierarchy document.

    Returns:
        dict: Parsed document with three types, listed child first
    """
    return {
        "name": "widgets",
        "settings": {"strict": True, "auto_promote": False},
        "types": {
            "Button": {"parent": "Widget", "defaults": {"enabled": False}},
            "Widget": {"declare": ["enabled"], "defaults": {"retries": 3}},
            "Label": {"parent": "Widget"},
        },
    }


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(
            mark.name in ["integration", "property", "slow"]
            for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)
