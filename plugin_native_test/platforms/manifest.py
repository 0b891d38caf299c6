"""Platform manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from plugin_native_test.models.plan import Platform
from plugin_native_test.platforms.base import PlatformRunner

if TYPE_CHECKING:
    from plugin_native_test.context import RunContext


@dataclass(frozen=True, kw_only=True)
class PlatformManifest:
    """Manifest describing a platform's test runner.

    The runner factory receives the run context so that run-level state
    (such as the resolved iOS destination) reaches the runner explicitly.
    """

    platform: Platform
    runner_factory: Callable[["RunContext"], PlatformRunner]

    @property
    def label(self) -> str:
        return self.platform.label
