"""Run-level state computed once before any package is processed."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from plugin_native_test.models.plan import ExecutionPlan, Platform
from plugin_native_test.platforms.manifest import PlatformManifest
from plugin_native_test.process_runner import ProcessRunner


@dataclass(frozen=True, kw_only=True)
class RunContext:
    """Immutable configuration shared by every package in a run."""

    plan: ExecutionPlan
    manifests: Mapping[Platform, PlatformManifest]
    process_runner: ProcessRunner = field(default_factory=ProcessRunner)
    ios_destination_flags: Sequence[str] = ()

    def manifest_for(self, platform: Platform) -> PlatformManifest:
        return self.manifests[platform]
