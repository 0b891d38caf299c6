"""Fixtures for tests against packages laid out on disk."""

import functools
from pathlib import Path

import pytest

from plugin_native_test.testing.packages import CreatePluginFn, create_plugin


@pytest.fixture
def packages_dir(tmp_path: Path) -> Path:
    """Create an empty packages directory."""
    directory = tmp_path / "packages"
    directory.mkdir()
    return directory


@pytest.fixture
def plugin_factory(packages_dir: Path) -> CreatePluginFn:
    """Return a function to create plugin packages in packages_dir."""
    return functools.partial(create_plugin, packages_dir)
