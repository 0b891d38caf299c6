"""Android platform module."""

from plugin_native_test.platforms.android.manifest import android_manifest
from plugin_native_test.platforms.android.runner import AndroidRunner

__all__ = ["AndroidRunner", "android_manifest"]
