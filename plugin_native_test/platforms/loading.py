"""Loading of platform runners from entry points."""

from collections.abc import Iterable, Mapping
from importlib.metadata import entry_points

from plugin_native_test.models.plan import Platform
from plugin_native_test.platforms.manifest import PlatformManifest

ENTRY_POINT_GROUP = "plugin_native_test.platforms"


class PlatformNotFoundError(Exception):
    """Raised when no runner is registered for a platform."""


def load_platform_manifest(platform: Platform) -> PlatformManifest:
    """Load a platform manifest by platform name.

    Args:
        platform: The platform, whose value is the key registered in
            pyproject.toml (e.g., "android", "ios")

    Returns:
        The platform manifest instance

    Raises:
        PlatformNotFoundError: If no runner is registered for the platform

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == platform.value:
            manifest: PlatformManifest = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise PlatformNotFoundError(
        f"Platform '{platform.value}' not found. Available platforms: {available}"
    )


def load_platform_manifests(
    platforms: Iterable[Platform],
) -> Mapping[Platform, PlatformManifest]:
    """Load the manifests for every given platform."""
    return {platform: load_platform_manifest(platform) for platform in platforms}
