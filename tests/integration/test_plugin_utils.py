"""Tests for plugin platform support checks."""

import pytest

from plugin_native_test.models.plan import Platform
from plugin_native_test.plugin_utils import (
    plugin_has_native_code_for_platform,
    plugin_supports_platform,
)
from plugin_native_test.testing.packages import CreatePluginFn


def test_supports_declared_platform(plugin_factory: CreatePluginFn) -> None:
    """Supports any declared platform when no mode is required."""
    package = plugin_factory("camera", platforms={"android": {"pluginClass": "A"}})

    assert plugin_supports_platform(Platform.ANDROID, package)
    assert not plugin_supports_platform(Platform.IOS, package)


def test_inline_and_federated_modes(plugin_factory: CreatePluginFn) -> None:
    """Distinguishes inline implementations from endorsed federated ones."""
    package = plugin_factory(
        "camera",
        platforms={
            "android": {"default_package": "camera_android"},
            "ios": {"pluginClass": "CameraPlugin"},
        },
    )

    android, ios = Platform.ANDROID, Platform.IOS
    assert not plugin_supports_platform(android, package, required_mode="inline")
    assert plugin_supports_platform(android, package, required_mode="federated")
    assert plugin_supports_platform(ios, package, required_mode="inline")
    assert not plugin_supports_platform(ios, package, required_mode="federated")


def test_non_plugin_package(plugin_factory: CreatePluginFn) -> None:
    """A package without a plugin section supports nothing."""
    package = plugin_factory("app")

    assert not plugin_supports_platform(Platform.LINUX, package)
    assert not plugin_has_native_code_for_platform(Platform.LINUX, package)


@pytest.mark.parametrize(
    ("declaration", "expected"),
    [
        ({"pluginClass": "CameraPlugin"}, True),
        ({"ffiPlugin": True}, True),
        ({"pluginClass": "none"}, False),
        ({"dartPluginClass": "CameraLinux"}, False),
        (None, False),
    ],
)
def test_native_code(
    plugin_factory: CreatePluginFn, declaration: dict | None, expected: bool
) -> None:
    """Detects native code from pluginClass or ffiPlugin."""
    package = plugin_factory("camera", platforms={"linux": declaration})

    assert plugin_has_native_code_for_platform(Platform.LINUX, package) is expected
