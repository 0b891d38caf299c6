"""Android platform manifest."""

from plugin_native_test.models.plan import Platform
from plugin_native_test.platforms.android.runner import AndroidRunner
from plugin_native_test.platforms.manifest import PlatformManifest

android_manifest = PlatformManifest(
    platform=Platform.ANDROID,
    runner_factory=AndroidRunner.from_context,
)
