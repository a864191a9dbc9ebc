"""Shared fixtures for slug tests."""

import pytest

import slug


@pytest.fixture(autouse=True)
def reset_default_store():
    """Restore the process-wide maps around every test."""
    slug.reset()
    yield
    slug.reset()
