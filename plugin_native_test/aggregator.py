"""Per-package aggregation of platform test results."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from plugin_native_test.context import RunContext
from plugin_native_test.models.plan import Platform
from plugin_native_test.models.result import PackageResult, PlatformResult
from plugin_native_test.plugin_utils import (
    plugin_has_native_code_for_platform,
    plugin_supports_platform,
)
from plugin_native_test.repository import RepositoryPackage

log = logging.getLogger(__name__)

NOTHING_TO_TEST = "Nothing to test for target platform(s)."
NO_TESTS_FOUND = "No tests found."


@dataclass(frozen=True, kw_only=True)
class PackageTester:
    """Runs every requested platform's tests for a package."""

    context: RunContext

    def testable_platforms(self, package: RepositoryPackage) -> Sequence[Platform]:
        """Filter the requested platforms down to those package implements natively."""
        platforms: list[Platform] = []
        for platform in self.context.plan.sorted_platforms:
            if not plugin_supports_platform(platform, package, required_mode="inline"):
                log.info("No implementation for %s.", platform.label)
                continue
            if not plugin_has_native_code_for_platform(platform, package):
                log.info("No native code for %s.", platform.label)
                continue
            platforms.append(platform)
        return platforms

    async def run_for_package(self, package: RepositoryPackage) -> PackageResult:
        """Test package on all applicable platforms and summarize the outcome."""
        test_platforms = self.testable_platforms(package)
        if not test_platforms:
            return PackageResult.skip(NOTHING_TO_TEST)

        report_labels = len(self.context.plan.platforms) > 1
        ran_tests = False
        failed = False
        failure_messages: list[str] = []

        for platform in test_platforms:
            label = platform.label
            log.info("Running tests for %s...", label)
            log.info("-" * 40)

            result = await self._run_platform(platform, package)
            ran_tests |= result.ran
            if result.state != "failed":
                continue

            failed = True
            # Labels are only useful when more than one platform was requested.
            if report_labels:
                failure_messages.append(
                    f"{label}: {result.error}" if result.error else label
                )
            elif result.error:
                failure_messages.append(result.error)

        if not ran_tests:
            return PackageResult.skip(NO_TESTS_FOUND)
        if failed:
            return PackageResult.fail(failure_messages)
        return PackageResult.success()

    async def _run_platform(
        self, platform: Platform, package: RepositoryPackage
    ) -> PlatformResult:
        """Run one platform's tests, converting unexpected errors into failures."""
        runner = self.context.manifest_for(platform).runner_factory(self.context)
        try:
            return await runner.run_tests(package, self.context.plan.mode)
        except Exception as e:
            log.error(
                "❌ %s tests raised an error: %s", platform.label, e, exc_info=e
            )
            return PlatformResult.failed(str(e) or type(e).__name__)
