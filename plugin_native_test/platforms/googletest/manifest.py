"""Windows and Linux platform manifests."""

from plugin_native_test.models.plan import Platform
from plugin_native_test.platforms.googletest.runner import GoogleTestRunner
from plugin_native_test.platforms.manifest import PlatformManifest

linux_manifest = PlatformManifest(
    platform=Platform.LINUX,
    runner_factory=GoogleTestRunner.for_linux,
)

windows_manifest = PlatformManifest(
    platform=Platform.WINDOWS,
    runner_factory=GoogleTestRunner.for_windows,
)
