"""Pytest configuration for all tests."""

import pytest

from services import PreviewSettings


@pytest.fixture
def settings():
    """Default preview settings, independent of the environment."""
    return PreviewSettings()
