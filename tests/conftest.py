"""Pytest configuration and shared fixtures for wrapped tests."""

import pytest


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from wrapped import wrap

    return wrap('hello')


@pytest.fixture
def sample_blank():
    """Sample Blank value for testing."""
    from wrapped import wrap

    return wrap(None)
