"""Windows and Linux platform module."""

from plugin_native_test.platforms.googletest.manifest import (
    linux_manifest,
    windows_manifest,
)
from plugin_native_test.platforms.googletest.runner import GoogleTestRunner

__all__ = ["GoogleTestRunner", "linux_manifest", "windows_manifest"]
