"""iOS and macOS test runner using xcodebuild."""

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from plugin_native_test.models.plan import Platform, TestMode
from plugin_native_test.models.result import PlatformResult, RunState, combine_states
from plugin_native_test.platforms.base import (
    PlatformRunner,
    log_no_example_tests,
    log_running_example_tests,
)
from plugin_native_test.platforms.xcode.discovery import (
    example_has_test_target,
    target_for_mode,
)
from plugin_native_test.repository import RepositoryPackage
from plugin_native_test.xcode import Xcode

if TYPE_CHECKING:
    from plugin_native_test.context import RunContext

log = logging.getLogger(__name__)

# The exit code from 'xcodebuild test' when there are no tests.
XCODEBUILD_NO_TESTS_EXIT_CODE = 66


@dataclass(frozen=True, kw_only=True)
class ExampleOutcome:
    """Outcome of testing a single example."""

    state: RunState
    error: str | None = None


@dataclass(frozen=True, kw_only=True)
class XcodeRunner(PlatformRunner):
    """Runs XCTests for one Apple platform.

    The test targets must be added to the Xcode project of each example app,
    usually at "example/{ios,macos}/Runner.xcworkspace".
    """

    platform: Platform
    extra_flags: Sequence[str] = ()

    @classmethod
    def for_ios(cls, context: "RunContext") -> "XcodeRunner":
        return cls(
            process_runner=context.process_runner,
            platform=Platform.IOS,
            extra_flags=tuple(context.ios_destination_flags),
        )

    @classmethod
    def for_macos(cls, context: "RunContext") -> "XcodeRunner":
        return cls(process_runner=context.process_runner, platform=Platform.MACOS)

    @property
    def xcode(self) -> Xcode:
        return Xcode(process_runner=self.process_runner)

    async def run_tests(
        self,
        package: RepositoryPackage,
        mode: TestMode,
    ) -> PlatformResult:
        """Run the matching test action in every example and fold the outcomes."""
        test_target = target_for_mode(mode)
        outcomes = [
            await self.run_example(example, test_target)
            for example in package.get_examples()
        ]

        state = functools.reduce(
            combine_states, (outcome.state for outcome in outcomes), "skipped"
        )
        if state != "failed":
            return PlatformResult(state=state)

        errors = [outcome.error for outcome in outcomes if outcome.error]
        return PlatformResult.failed("; ".join(errors) or None)

    async def run_example(
        self, example: RepositoryPackage, test_target: str | None
    ) -> ExampleOutcome:
        """Run the test action for a single example."""
        label = self.platform.label
        example_name = example.display_name

        if test_target is not None:
            has_target = await example_has_test_target(
                self.xcode, example, self.platform, test_target
            )
            if has_target is None:
                log.error("❌ Unable to check targets for %s.", example_name)
                return ExampleOutcome(
                    state="failed",
                    error=f"Unable to check targets for {example_name}",
                )
            if not has_target:
                log.info('No "%s" target in %s; skipping.', test_target, example_name)
                return ExampleOutcome(state="skipped")

        log_running_example_tests(example, label)
        exit_code = await self.xcode.run_xcodebuild(
            example.directory,
            actions=["test"],
            workspace=f"{self.platform.value}/Runner.xcworkspace",
            scheme="Runner",
            configuration="Debug",
            extra_flags=[
                *([f"-only-testing:{test_target}"] if test_target else []),
                *self.extra_flags,
                "GCC_TREAT_WARNINGS_AS_ERRORS=YES",
            ],
        )

        if exit_code == XCODEBUILD_NO_TESTS_EXIT_CODE:
            log_no_example_tests(example, label)
            return ExampleOutcome(state="skipped")
        if exit_code == 0:
            log.info("✅ Successfully ran %s xctest for %s", label, example_name)
            return ExampleOutcome(state="succeeded")

        log.error(
            "❌ %s tests failed for %s (exit code %d)", label, example_name, exit_code
        )
        return ExampleOutcome(
            state="failed",
            error=f"{example_name} tests failed (exit code {exit_code})",
        )
