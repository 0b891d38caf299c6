"""Detection of Google Test binaries in an example's build output."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

from plugin_native_test.repository import RepositoryPackage

TestBinaryPredicate: TypeAlias = Callable[[Path], bool]

# Only the release build is run, to avoid running the same tests twice.
# Release rather than debug since that is what building the examples produces.
RELEASE_CONFIGURATION_NAMES = frozenset({"release", "Release"})


def is_windows_test_binary(path: Path) -> bool:
    return path.name.endswith(("_test.exe", "_tests.exe"))


def is_linux_test_binary(path: Path) -> bool:
    return path.name.endswith(("_test", "_tests"))


def is_release_build(path: Path) -> bool:
    """Whether path sits inside a release-configuration build directory."""
    return not RELEASE_CONFIGURATION_NAMES.isdisjoint(path.parts)


def find_test_binaries(
    package: RepositoryPackage,
    build_directory_name: str,
    is_test_binary: TestBinaryPredicate,
) -> Sequence[Path]:
    """Find release-configuration test binaries in every example's build output.

    Args:
        package: Plugin package whose examples have been built
        build_directory_name: Subdirectory of each example's build/ directory
        is_test_binary: Predicate matching test binary file names

    Returns:
        Paths of the test binaries, in a stable order

    """
    binaries: list[Path] = []
    for example in package.get_examples():
        build_dir = example.directory / "build" / build_directory_name
        if not build_dir.is_dir():
            continue
        binaries.extend(
            path
            for path in sorted(build_dir.rglob("*"))
            if path.is_file()
            and is_test_binary(path)
            and is_release_build(path.relative_to(build_dir))
        )
    return binaries
