"""Static checks of a plugin's declared platform support."""

from typing import Literal, TypeAlias

from plugin_native_test.models.plan import Platform
from plugin_native_test.repository import RepositoryPackage

PlatformSupport: TypeAlias = Literal["inline", "federated"]


def plugin_supports_platform(
    platform: Platform,
    package: RepositoryPackage,
    required_mode: PlatformSupport | None = None,
) -> bool:
    """Check whether package declares an implementation for platform.

    Args:
        platform: Platform to check
        package: Plugin package
        required_mode: If set, the declaration must be inline (implemented in
            this package) or federated (delegated via default_package)

    Returns:
        True if the plugin declares the platform in the requested mode.

    """
    entry = package.parse_pubspec().platform_entry(platform.value)
    if entry is None:
        return False
    if required_mode is None:
        return True
    return entry.is_federated == (required_mode == "federated")


def plugin_has_native_code_for_platform(
    platform: Platform, package: RepositoryPackage
) -> bool:
    """Check whether package has native code for platform.

    Native code is declared with a pluginClass, or with ffiPlugin for plugins
    that bundle native libraries without a platform channel.
    """
    entry = package.parse_pubspec().platform_entry(platform.value)
    if entry is None:
        return False
    if entry.ffi_plugin:
        return True
    # "none" is a legacy placeholder for Dart-only implementations.
    return entry.plugin_class is not None and entry.plugin_class != "none"
