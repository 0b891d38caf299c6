"""Models for the parts of pubspec.yaml that describe plugin platforms."""

from collections.abc import Mapping

from pydantic import Field

from plugin_native_test.models.base import Model


class PluginPlatform(Model):
    """One entry under flutter.plugin.platforms."""

    plugin_class: str | None = Field(default=None, alias="pluginClass")
    dart_plugin_class: str | None = Field(default=None, alias="dartPluginClass")
    ffi_plugin: bool = Field(default=False, alias="ffiPlugin")
    default_package: str | None = Field(
        default=None,
        description="Endorsed implementation package for federated plugins",
    )

    @property
    def is_federated(self) -> bool:
        return self.default_package is not None


class PluginSection(Model):
    """The flutter.plugin section."""

    platforms: Mapping[str, PluginPlatform | None] = Field(default_factory=dict)


class FlutterSection(Model):
    """The flutter section."""

    plugin: PluginSection | None = None


class Pubspec(Model):
    """A package's pubspec.yaml."""

    name: str
    flutter: FlutterSection | None = None

    def platform_entry(self, platform: str) -> PluginPlatform | None:
        """Return the plugin declaration for platform, if it has one.

        An empty platform key (e.g. `web:` with nothing under it) still counts
        as a declaration.
        """
        if self.flutter is None or self.flutter.plugin is None:
            return None
        platforms = self.flutter.plugin.platforms
        if platform not in platforms:
            return None
        return platforms[platform] or PluginPlatform()
