"""Turns command line flags into the run context."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeAlias

from plugin_native_test.context import RunContext
from plugin_native_test.errors import NoSimulatorAvailableError
from plugin_native_test.models.plan import ExecutionPlan, Platform
from plugin_native_test.platforms.loading import load_platform_manifests
from plugin_native_test.platforms.manifest import PlatformManifest
from plugin_native_test.process_runner import ProcessRunner
from plugin_native_test.xcode import Xcode

log = logging.getLogger(__name__)

ManifestLoader: TypeAlias = Callable[
    [Iterable[Platform]], Mapping[Platform, PlatformManifest]
]

UNIT_ONLY_ISSUES = {
    Platform.WINDOWS: "https://github.com/flutter/flutter/issues/70233",
    Platform.LINUX: "https://github.com/flutter/flutter/issues/70235",
}


def warn_unsupported_integration(plan: ExecutionPlan) -> None:
    """Warn for platforms that will skip the requested integration tests."""
    if not plan.integration:
        return
    for platform in (Platform.WINDOWS, Platform.LINUX):
        if platform in plan.platforms:
            log.warning(
                "This command currently only supports unit tests for %s. See %s.",
                platform.label,
                UNIT_ONLY_ISSUES[platform],
            )


async def resolve_ios_destination_flags(
    xcode: Xcode, ios_destination: str = ""
) -> Sequence[str]:
    """Build the xcodebuild -destination flags for iOS tests.

    Raises:
        NoSimulatorAvailableError: If no destination was given and no
            simulator could be found

    """
    destination = ios_destination
    if not destination:
        simulator_id = await xcode.find_best_available_iphone_simulator()
        if simulator_id is None:
            raise NoSimulatorAvailableError("Cannot find any available iOS simulators.")
        destination = f"id={simulator_id}"
    return ("-destination", destination)


async def resolve_run_context(
    platforms: Iterable[Platform],
    *,
    unit: bool = True,
    integration: bool = True,
    ios_destination: str = "",
    process_runner: ProcessRunner | None = None,
    manifest_loader: ManifestLoader = load_platform_manifests,
) -> RunContext:
    """Validate the requested flags and compute run-level state.

    Args:
        platforms: Platforms whose flags were set
        unit: Whether native unit tests are enabled
        integration: Whether native integration tests are enabled
        ios_destination: Explicit xcodebuild destination for iOS tests
        process_runner: Runner for external commands
        manifest_loader: Resolves platforms to their runner manifests

    Raises:
        InvalidArgumentsError: If no platform or no test type is enabled
        NoSimulatorAvailableError: If iOS needs a simulator and none exists

    """
    plan = ExecutionPlan(
        platforms=frozenset(platforms), unit=unit, integration=integration
    )
    warn_unsupported_integration(plan)

    runner = process_runner if process_runner is not None else ProcessRunner()
    ios_destination_flags: Sequence[str] = ()
    if Platform.IOS in plan.platforms:
        ios_destination_flags = await resolve_ios_destination_flags(
            Xcode(process_runner=runner), ios_destination
        )

    return RunContext(
        plan=plan,
        manifests=manifest_loader(plan.sorted_platforms),
        process_runner=runner,
        ios_destination_flags=ios_destination_flags,
    )
