"""Abstract base class for platform test runners."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from plugin_native_test.models.plan import TestMode
from plugin_native_test.models.result import PlatformResult
from plugin_native_test.process_runner import ProcessRunner
from plugin_native_test.repository import RepositoryPackage

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PlatformRunner(ABC):
    """Runs one platform's native tests for all examples of a package."""

    process_runner: ProcessRunner

    @abstractmethod
    async def run_tests(
        self,
        package: RepositoryPackage,
        mode: TestMode,
    ) -> PlatformResult:
        """Run all applicable tests of package's examples.

        Args:
            package: Plugin package whose examples hold the native tests
            mode: Test types requested for this run

        Returns:
            Overall result for this platform

        """


def log_running_example_tests(example: RepositoryPackage, label: str) -> None:
    """Log that label tests for example are about to run."""
    log.info("Running %s tests for %s...", label, example.display_name)


def log_no_example_tests(example: RepositoryPackage, label: str) -> None:
    """Log that no label tests were found for example."""
    log.info("No %s tests found for %s", label, example.display_name)
