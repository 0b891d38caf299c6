"""Android test runner using Gradle."""

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from plugin_native_test.gradle import GradleProject
from plugin_native_test.models.plan import TestMode
from plugin_native_test.models.result import PlatformResult
from plugin_native_test.platforms.android.discovery import (
    example_has_native_integration_tests,
    example_has_unit_tests,
)
from plugin_native_test.platforms.base import (
    PlatformRunner,
    log_no_example_tests,
    log_running_example_tests,
)
from plugin_native_test.repository import RepositoryPackage

if TYPE_CHECKING:
    from plugin_native_test.context import RunContext

log = logging.getLogger(__name__)

UNIT_TEST_TASK = "testDebugUnitTest"
INTEGRATION_TEST_TASK = "app:connectedAndroidTest"
# Bridge tests carry this annotation, which lets Gradle skip them.
INTEGRATION_TEST_FILTER = (
    "-Pandroid.testInstrumentationRunnerArguments."
    "notAnnotation=io.flutter.plugins.DartIntegrationTest"
)

MISSING_BUILD_ERROR = "Examples must be built before testing."
NO_UNIT_TESTS_ERROR = "No unit tests ran (use --exclude if this is intentional)."


@dataclass(frozen=True, kw_only=True)
class AndroidRunner(PlatformRunner):
    """Runs JUnit and instrumentation tests through each example's Gradle project."""

    host_platform: str = field(default=sys.platform)

    @classmethod
    def from_context(cls, context: "RunContext") -> "AndroidRunner":
        return cls(process_runner=context.process_runner)

    def gradle_project(self, example: RepositoryPackage) -> GradleProject:
        return GradleProject(
            example_dir=example.directory,
            process_runner=self.process_runner,
            host_platform=self.host_platform,
        )

    async def run_tests(
        self,
        package: RepositoryPackage,
        mode: TestMode,
    ) -> PlatformResult:
        """Run unit and/or integration tests for every example."""
        ran_unit_tests = False
        ran_any_tests = False
        has_missing_build = False
        failures: list[str] = []

        for example in package.get_examples():
            has_unit_tests = example_has_unit_tests(example)
            has_integration_tests = example_has_native_integration_tests(example)

            if mode.unit and not has_unit_tests:
                log_no_example_tests(example, "Android unit")
            if mode.integration and not has_integration_tests:
                log_no_example_tests(example, "Android integration")

            run_unit_tests = mode.unit and has_unit_tests
            run_integration_tests = mode.integration and has_integration_tests
            if not (run_unit_tests or run_integration_tests):
                continue

            example_name = example.display_name
            log_running_example_tests(example, "Android")

            project = self.gradle_project(example)
            if not project.is_configured():
                log.error(
                    '❌ Run "flutter build apk" on %s, or run this tool\'s '
                    '"build-examples --apk" command, before executing tests.',
                    example_name,
                )
                has_missing_build = True
                failures.append(f"{example_name} has not been built")
                continue

            if run_unit_tests:
                log.info("Running unit tests...")
                exit_code = await project.run_command(UNIT_TEST_TASK)
                if exit_code != 0:
                    log.error("❌ %s unit tests failed.", example_name)
                    failures.append(f"{example_name} unit tests failed")
                ran_unit_tests = True
                ran_any_tests = True

            if run_integration_tests:
                log.info("Running integration tests...")
                exit_code = await project.run_command(
                    INTEGRATION_TEST_TASK, [INTEGRATION_TEST_FILTER]
                )
                if exit_code != 0:
                    log.error("❌ %s integration tests failed.", example_name)
                    failures.append(f"{example_name} integration tests failed")
                ran_any_tests = True

        if failures:
            if has_missing_build:
                return PlatformResult.failed(MISSING_BUILD_ERROR)
            return PlatformResult.failed("; ".join(failures))
        if not mode.integration_only and not ran_unit_tests:
            log.error("❌ No unit tests ran. Plugins are required to have unit tests.")
            return PlatformResult.failed(NO_UNIT_TESTS_ERROR)
        if not ran_any_tests:
            return PlatformResult.skipped()
        return PlatformResult.succeeded()
