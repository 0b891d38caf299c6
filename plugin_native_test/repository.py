"""Packages and example apps as laid out on disk."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from plugin_native_test.models.pubspec import Pubspec

log = logging.getLogger(__name__)

PUBSPEC_FILENAME = "pubspec.yaml"


@dataclass(frozen=True, kw_only=True)
class RepositoryPackage:
    """A package directory (or an example app inside one).

    Args:
        directory: Directory containing the package's pubspec.yaml
        root: Directory that display names are made relative to

    """

    directory: Path
    root: Path | None = None

    @property
    def display_name(self) -> str:
        """Path of the package relative to the root, using '/' separators."""
        if self.root is None:
            return self.directory.name
        try:
            return self.directory.relative_to(self.root).as_posix()
        except ValueError:
            return self.directory.name

    @property
    def pubspec_file(self) -> Path:
        return self.directory / PUBSPEC_FILENAME

    def parse_pubspec(self) -> Pubspec:
        """Load and validate the package's pubspec.yaml.

        Raises:
            FileNotFoundError: If the package has no pubspec.yaml
            yaml.YAMLError: If the file is not valid YAML
            pydantic.ValidationError: If the content is not a valid pubspec

        """
        data = yaml.safe_load(self.pubspec_file.read_text(encoding="utf-8"))
        return Pubspec.model_validate(data or {})

    def get_examples(self) -> Sequence["RepositoryPackage"]:
        """Return the example apps of this package.

        The conventional layout is a single example/ package; packages with
        several examples put each one in its own directory under example/.
        """
        example_dir = self.directory / "example"
        if not example_dir.is_dir():
            return []
        if (example_dir / PUBSPEC_FILENAME).exists():
            return [RepositoryPackage(directory=example_dir, root=self.root)]
        return [
            RepositoryPackage(directory=child, root=self.root)
            for child in sorted(example_dir.iterdir())
            if child.is_dir() and (child / PUBSPEC_FILENAME).exists()
        ]


def find_packages(packages_dir: Path) -> Sequence[RepositoryPackage]:
    """Find every package under packages_dir.

    Direct subdirectories with a pubspec.yaml are packages. Subdirectories
    without one are federated plugin groups, whose own subdirectories are the
    packages.
    """
    packages: list[RepositoryPackage] = []
    for entry in sorted(packages_dir.iterdir()):
        if not entry.is_dir():
            continue
        if (entry / PUBSPEC_FILENAME).exists():
            packages.append(RepositoryPackage(directory=entry, root=packages_dir))
            continue
        for child in sorted(entry.iterdir()):
            if child.is_dir() and (child / PUBSPEC_FILENAME).exists():
                packages.append(RepositoryPackage(directory=child, root=packages_dir))

    log.debug("Found %d package(s) in %s", len(packages), packages_dir)
    return packages
