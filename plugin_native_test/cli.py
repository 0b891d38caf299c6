"""CLI entry point for running native plugin tests."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Collection, Sequence
from pathlib import Path
from typing import Any

from plugin_native_test.aggregator import PackageTester
from plugin_native_test.errors import EXIT_COMMAND_FOUND_ERRORS, ToolExit
from plugin_native_test.models.plan import Platform
from plugin_native_test.package_looping import PackageLooper, PackageRunResult
from plugin_native_test.resolver import resolve_run_context

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "skip": "⏭️",
    "excluded": "➖",
}

DESCRIPTION = """\
Runs native unit tests and native integration tests.

Currently supported platforms:
- Android
- iOS: requires 'xcrun' to be in your path.
- Linux (unit tests only)
- macOS: requires 'xcrun' to be in your path.
- Windows (unit tests only)

The example app(s) must be built for all targeted platforms before running
this command.
"""


def log_results_summary(
    log: logging.Logger, package_results: Sequence[PackageRunResult]
) -> None:
    """Log a formatted overview of the run, followed by failure details."""
    log.info("=" * 80)
    log.info("Run overview:")
    log.info("=" * 80)

    for package_result in package_results:
        result = package_result.result
        symbol = STATUS_SYMBOLS.get(result.state, "?")
        if result.state == "skip" and result.details:
            log.info(
                "%s %s: %s (%s)",
                symbol,
                package_result.package,
                result.state,
                result.details[0],
            )
        else:
            log.info("%s %s: %s", symbol, package_result.package, result.state)

    failures = [r for r in package_results if r.result.state == "failure"]
    if not failures:
        log.info("No issues found!")
        return

    log.error("The following packages had errors:")
    for package_result in failures:
        log.error("  %s:", package_result.package)
        for detail in package_result.result.details:
            log.error("    %s", detail)


def format_output(package_results: Sequence[PackageRunResult]) -> dict[str, Any]:
    """Format package results for JSON output."""
    all_results: list[dict[str, Any]] = [
        {
            "package": package_result.package,
            "status": package_result.result.state,
            "details": list(package_result.result.details),
        }
        for package_result in package_results
    ]

    return {
        "total": len(all_results),
        "succeeded": sum(1 for r in all_results if r["status"] == "success"),
        "failed": sum(1 for r in all_results if r["status"] == "failure"),
        "skipped": sum(1 for r in all_results if r["status"] == "skip"),
        "excluded": sum(1 for r in all_results if r["status"] == "excluded"),
        "results": all_results,
    }


def parse_package_list(packages: str) -> frozenset[str]:
    """Parse a comma-separated list of package names."""
    return frozenset(p.strip() for p in packages.split(",") if p.strip())


async def run(
    platforms: Collection[Platform],
    packages_dir: Path,
    unit: bool = True,
    integration: bool = True,
    ios_destination: str = "",
    packages: Collection[str] = frozenset(),
    exclude: Collection[str] = frozenset(),
) -> int:
    """Run native tests and return exit code."""
    log = logging.getLogger("plugin_native_test")

    try:
        context = await resolve_run_context(
            platforms,
            unit=unit,
            integration=integration,
            ios_destination=ios_destination,
        )
    except ToolExit as e:
        log.error("❌ %s", e)
        return e.exit_code

    log.info(
        "Testing platforms: %s",
        ", ".join(p.label for p in context.plan.sorted_platforms),
    )

    looper = PackageLooper(
        tester=PackageTester(context=context),
        packages_dir=packages_dir,
        packages=packages,
        exclude=exclude,
    )
    package_results = await looper.run()

    log_results_summary(log, package_results)

    output = format_output(package_results)
    print(json.dumps(output, indent=2))

    has_failures = any(r.result.state == "failure" for r in package_results)
    return EXIT_COMMAND_FOUND_ERRORS if has_failures else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the native-test command."""
    parser = argparse.ArgumentParser(
        prog="plugin-native-test",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    for platform in Platform:
        parser.add_argument(
            f"--{platform.value}",
            action="store_true",
            help=f"Runs {platform.label} tests",
        )
    # Both unit and integration tests run by default; the flags allow
    # disabling one or the other.
    parser.add_argument(
        "--unit",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Runs native unit tests",
    )
    parser.add_argument(
        "--integration",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Runs native integration (UI) tests",
    )
    parser.add_argument(
        "--ios-destination",
        default="",
        help=(
            "Specify the destination when running iOS tests. This is passed "
            "to the `-destination` argument in the xcodebuild command."
        ),
    )
    parser.add_argument(
        "--packages-dir",
        type=Path,
        default=Path("packages"),
        help="Directory containing the plugin packages",
    )
    parser.add_argument(
        "--packages",
        default="",
        help="Comma-separated package names to run on (all if not provided)",
    )
    parser.add_argument(
        "--exclude",
        default="",
        help="Comma-separated package names to skip",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            platforms=[p for p in Platform if getattr(args, p.value)],
            packages_dir=args.packages_dir,
            unit=args.unit,
            integration=args.integration,
            ios_destination=args.ios_destination,
            packages=parse_package_list(args.packages),
            exclude=parse_package_list(args.exclude),
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
