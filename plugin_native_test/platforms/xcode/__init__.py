"""iOS and macOS platform module."""

from plugin_native_test.platforms.xcode.manifest import ios_manifest, macos_manifest
from plugin_native_test.platforms.xcode.runner import XcodeRunner

__all__ = ["XcodeRunner", "ios_manifest", "macos_manifest"]
