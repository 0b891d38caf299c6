"""Iteration over the packages of a repository."""

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from plugin_native_test.aggregator import PackageTester
from plugin_native_test.models.result import PackageResult
from plugin_native_test.repository import RepositoryPackage, find_packages

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PackageRunResult:
    """Result container for one package in a run."""

    package: str
    result: PackageResult


@dataclass(frozen=True, kw_only=True)
class PackageLooper:
    """Runs a package tester over every selected package, one at a time."""

    tester: PackageTester
    packages_dir: Path
    packages: Collection[str] = field(default_factory=frozenset)
    exclude: Collection[str] = field(default_factory=frozenset)

    def selected_packages(self) -> Sequence[RepositoryPackage]:
        """Packages to report on, honouring the --packages filter."""
        found = find_packages(self.packages_dir)
        if not self.packages:
            return found
        selected = [p for p in found if p.directory.name in self.packages]
        missing = set(self.packages) - {p.directory.name for p in selected}
        for name in sorted(missing):
            log.warning("Package '%s' not found in %s", name, self.packages_dir)
        return selected

    async def run(self) -> Sequence[PackageRunResult]:
        """Run tests for every selected package.

        Returns:
            One result per package, in the order the packages were processed

        """
        results: list[PackageRunResult] = []
        for package in self.selected_packages():
            name = package.display_name
            if package.directory.name in self.exclude:
                log.info("Not running for %s; excluded", name)
                results.append(
                    PackageRunResult(package=name, result=PackageResult.excluded())
                )
                continue

            log.info("=" * 40)
            log.info("Running for %s...", name)
            log.info("=" * 40)
            results.append(
                PackageRunResult(package=name, result=await self._run_package(package))
            )
        return results

    async def _run_package(self, package: RepositoryPackage) -> PackageResult:
        try:
            return await self.tester.run_for_package(package)
        except Exception as e:
            log.error(
                "❌ Unable to test %s: %s", package.display_name, e, exc_info=e
            )
            return PackageResult.fail([str(e) or type(e).__name__])
