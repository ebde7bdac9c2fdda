"""Pytest configuration and shared fixtures for klaw-fp tests."""

import pytest


@pytest.fixture
def reset_config():
    """Restore the default configuration around a test."""
    from klaw_fp._config import reset

    reset()
    yield
    reset()


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from klaw_fp import Right

    return Right(42)


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from klaw_fp import Left

    return Left('test error')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_fp import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_fp import Nothing

    return Nothing


@pytest.fixture
def events():
    """Ordered log of observations recorded by test recipes."""
    return []
