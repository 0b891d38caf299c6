"""Shared fixtures."""

import pytest

from plugin_native_test.testing.process_runner import FakeProcessRunner


@pytest.fixture
def process_runner() -> FakeProcessRunner:
    """Create a process runner that records commands instead of running them."""
    return FakeProcessRunner()
