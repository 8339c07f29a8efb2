"""Shared fixtures for proctree tests."""

import pytest

from proctree.config import get_settings
from proctree.runner import CommandResult


class FakeRunner:
    """Runner that records argv and replays a canned result."""

    def __init__(self, returncode=0, stdout="", stderr="", error=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls = []

    def __call__(self, argv, capture):
        self.calls.append((list(argv), capture))
        if self.error is not None:
            raise self.error
        return CommandResult(
            argv=list(argv),
            returncode=self.returncode,
            stdout=self.stdout if capture == "stdout" else "",
            stderr=self.stderr if capture == "stderr" else "",
        )


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
