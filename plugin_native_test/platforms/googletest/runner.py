"""Windows and Linux test runner for Google Test binaries."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from plugin_native_test.models.plan import Platform, TestMode
from plugin_native_test.models.result import PlatformResult
from plugin_native_test.platforms.base import PlatformRunner
from plugin_native_test.platforms.googletest.discovery import (
    TestBinaryPredicate,
    find_test_binaries,
    is_linux_test_binary,
    is_windows_test_binary,
)
from plugin_native_test.repository import RepositoryPackage

if TYPE_CHECKING:
    from plugin_native_test.context import RunContext

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class GoogleTestRunner(PlatformRunner):
    """Runs every Google Test binary built by a package's examples.

    Only unit tests are supported on these platforms.
    """

    platform: Platform
    is_test_binary: TestBinaryPredicate
    binary_pattern: str

    @classmethod
    def for_windows(cls, context: "RunContext") -> "GoogleTestRunner":
        return cls(
            process_runner=context.process_runner,
            platform=Platform.WINDOWS,
            is_test_binary=is_windows_test_binary,
            binary_pattern="*_test(s).exe",
        )

    @classmethod
    def for_linux(cls, context: "RunContext") -> "GoogleTestRunner":
        return cls(
            process_runner=context.process_runner,
            platform=Platform.LINUX,
            is_test_binary=is_linux_test_binary,
            binary_pattern="*_test(s)",
        )

    async def run_tests(
        self,
        package: RepositoryPackage,
        mode: TestMode,
    ) -> PlatformResult:
        """Run all release test binaries, failing if there are none."""
        if mode.integration_only:
            return PlatformResult.skipped()

        test_binaries = find_test_binaries(
            package, self.platform.value, self.is_test_binary
        )
        if not test_binaries:
            log.error(
                "❌ No test binaries found. At least one %s binary should be "
                "built by the example(s)",
                self.binary_pattern,
            )
            return PlatformResult.failed(
                f"No test binaries found in build/{self.platform.value}"
            )

        failures: list[str] = []
        for test_binary in test_binaries:
            log.info("Running %s...", test_binary.name)
            exit_code = await self.process_runner.run_and_stream(str(test_binary), [])
            if exit_code != 0:
                log.error("❌ %s failed (exit code %d)", test_binary.name, exit_code)
                failures.append(f"{test_binary.name} failed (exit code {exit_code})")

        if failures:
            return PlatformResult.failed("; ".join(failures))
        return PlatformResult.succeeded()
