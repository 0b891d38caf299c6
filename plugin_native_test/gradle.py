"""Wrapper around an Android example's Gradle project."""

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from plugin_native_test.process_runner import ProcessRunner


@dataclass(frozen=True, kw_only=True)
class GradleProject:
    """The Android project of a single example app."""

    example_dir: Path
    process_runner: ProcessRunner
    host_platform: str = field(default=sys.platform)

    @property
    def android_dir(self) -> Path:
        return self.example_dir / "android"

    @property
    def gradle_wrapper(self) -> Path:
        name = "gradlew.bat" if self.host_platform == "win32" else "gradlew"
        return self.android_dir / name

    def is_configured(self) -> bool:
        """Whether the project has been generated by building the example.

        The Gradle wrapper only exists after the app has been built once.
        """
        return self.gradle_wrapper.exists()

    async def run_command(
        self, target: str, arguments: Sequence[str] = ()
    ) -> int:
        """Run a Gradle task in the project, streaming output.

        Returns:
            Exit code of the Gradle invocation

        """
        return await self.process_runner.run_and_stream(
            str(self.gradle_wrapper),
            [target, *arguments],
            cwd=self.android_dir,
        )
