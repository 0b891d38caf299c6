"""iOS and macOS platform manifests."""

from plugin_native_test.models.plan import Platform
from plugin_native_test.platforms.manifest import PlatformManifest
from plugin_native_test.platforms.xcode.runner import XcodeRunner

ios_manifest = PlatformManifest(
    platform=Platform.IOS,
    runner_factory=XcodeRunner.for_ios,
)

macos_manifest = PlatformManifest(
    platform=Platform.MACOS,
    runner_factory=XcodeRunner.for_macos,
)
