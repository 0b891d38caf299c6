"""Detection of XCTest targets in an example app."""

from pathlib import Path

from plugin_native_test.models.plan import Platform, TestMode
from plugin_native_test.repository import RepositoryPackage
from plugin_native_test.xcode import Xcode

UNIT_TEST_TARGET = "RunnerTests"
INTEGRATION_TEST_TARGET = "RunnerUITests"


def target_for_mode(mode: TestMode) -> str | None:
    """Return the only target to run, or None to run the whole test action."""
    if mode.unit_only:
        return UNIT_TEST_TARGET
    if mode.integration_only:
        return INTEGRATION_TEST_TARGET
    return None


def runner_project(example: RepositoryPackage, platform: Platform) -> Path:
    return example.directory / platform.value / "Runner.xcodeproj"


async def example_has_test_target(
    xcode: Xcode,
    example: RepositoryPackage,
    platform: Platform,
    target: str,
) -> bool | None:
    """Check whether example's Runner project defines target.

    Returns:
        None when the project can't be queried, which is not the same as the
        target being absent.

    """
    return await xcode.project_has_target(runner_project(example, platform), target)
