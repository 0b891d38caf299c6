"""Tests for the Gradle project wrapper."""

from pathlib import Path

from plugin_native_test.gradle import GradleProject
from plugin_native_test.testing.packages import touch
from plugin_native_test.testing.process_runner import FakeProcessRunner


def test_is_configured_requires_wrapper(
    tmp_path: Path, process_runner: FakeProcessRunner
) -> None:
    """Is only configured once the Gradle wrapper exists."""
    project = GradleProject(
        example_dir=tmp_path, process_runner=process_runner, host_platform="darwin"
    )
    assert not project.is_configured()

    touch(tmp_path / "android" / "gradlew")

    assert project.is_configured()


def test_windows_wrapper(tmp_path: Path, process_runner: FakeProcessRunner) -> None:
    """Uses the batch wrapper on Windows hosts."""
    touch(tmp_path / "android" / "gradlew")
    project = GradleProject(
        example_dir=tmp_path, process_runner=process_runner, host_platform="win32"
    )
    assert not project.is_configured()

    touch(tmp_path / "android" / "gradlew.bat")

    assert project.is_configured()


async def test_run_command(tmp_path: Path, process_runner: FakeProcessRunner) -> None:
    """Runs the task through the wrapper in the android directory."""
    process_runner.add_result(str(tmp_path / "android" / "gradlew"), exit_code=1)
    project = GradleProject(
        example_dir=tmp_path, process_runner=process_runner, host_platform="linux"
    )

    exit_code = await project.run_command("testDebugUnitTest", ["--info"])

    assert exit_code == 1
    [call] = process_runner.calls
    assert call.args == ["testDebugUnitTest", "--info"]
    assert call.cwd == tmp_path / "android"
    assert call.streamed
