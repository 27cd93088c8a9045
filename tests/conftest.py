"""Pytest configuration and shared fixtures for klaw-failable tests."""

import pytest


@pytest.fixture
def boom():
    """A plain exception that is not a FailureWrapper."""
    return RuntimeError('boom')


@pytest.fixture
def wrapped_failure():
    """An existing FailureWrapper around a KeyError."""
    from klaw_failable import FailureWrapper

    return FailureWrapper(KeyError('missing'))


@pytest.fixture
def raiser():
    """Build a callable that raises the given exception for any arguments."""

    def build(error):
        def body(*_args):
            raise error

        return body

    return build
