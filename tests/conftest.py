"""Pytest configuration and shared fixtures for monadkit tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from monadkit import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from monadkit import Nothing

    return Nothing


@pytest.fixture
def sample_writer():
    """Sample Writer with a two-entry log."""
    from monadkit import Writer

    return Writer.of(10, ['step 1', 'step 2'])
