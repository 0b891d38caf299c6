"""Tests for Android test discovery and running."""

import logging
from pathlib import Path

import pytest

from plugin_native_test.models.plan import TestMode
from plugin_native_test.platforms.android.discovery import (
    example_has_native_integration_tests,
    example_has_unit_tests,
)
from plugin_native_test.platforms.android.runner import (
    INTEGRATION_TEST_FILTER,
    AndroidRunner,
)
from plugin_native_test.repository import RepositoryPackage
from plugin_native_test.testing.packages import CreatePluginFn, touch
from plugin_native_test.testing.process_runner import FakeProcessRunner

UNIT_ONLY = TestMode(unit=True, integration=False)
INTEGRATION_ONLY = TestMode(unit=False, integration=True)
BOTH = TestMode(unit=True, integration=True)


def add_unit_tests(example: Path) -> None:
    touch(example / "android" / "app" / "src" / "test" / "FooTest.java")


def add_integration_tests(example: Path, *names: str) -> None:
    directory = example / "android" / "app" / "src" / "androidTest" / "java"
    for name in names:
        touch(directory / name)


def configure_build(example: Path) -> Path:
    return touch(example / "android" / "gradlew")


@pytest.fixture
def plugin(plugin_factory: CreatePluginFn) -> RepositoryPackage:
    return plugin_factory("plugin", platforms={"android": {"pluginClass": "Plugin"}})


@pytest.fixture
def example(plugin: RepositoryPackage) -> Path:
    return plugin.directory / "example"


@pytest.fixture
def runner(process_runner: FakeProcessRunner) -> AndroidRunner:
    return AndroidRunner(process_runner=process_runner, host_platform="linux")


class TestDiscovery:
    """Tests for Android test discovery."""

    def test_no_unit_tests(self, plugin: RepositoryPackage) -> None:
        """Finds no unit tests without either test directory."""
        [example] = plugin.get_examples()

        assert not example_has_unit_tests(example)

    def test_app_level_unit_tests(
        self, plugin: RepositoryPackage, example: Path
    ) -> None:
        """Finds unit tests in the example app's project."""
        add_unit_tests(example)
        [repo_example] = plugin.get_examples()

        assert example_has_unit_tests(repo_example)

    def test_top_level_unit_tests(self, plugin: RepositoryPackage) -> None:
        """Finds unit tests in the plugin's own Android project."""
        (plugin.directory / "android" / "src" / "test").mkdir(parents=True)
        [example] = plugin.get_examples()

        assert example_has_unit_tests(example)

    def test_only_bridge_tests(self, plugin: RepositoryPackage, example: Path) -> None:
        """Ignores bridge tests and the bridge annotation."""
        add_integration_tests(
            example, "FooActivityTest.java", "DartIntegrationTest.java"
        )
        [repo_example] = plugin.get_examples()

        assert not example_has_native_integration_tests(repo_example)

    def test_native_integration_tests(
        self, plugin: RepositoryPackage, example: Path
    ) -> None:
        """Finds native tests next to bridge tests."""
        add_integration_tests(
            example, "FooActivityTest.java", "DartIntegrationTest.java", "BarTest.java"
        )
        [repo_example] = plugin.get_examples()

        assert example_has_native_integration_tests(repo_example)

    def test_no_integration_directory(self, plugin: RepositoryPackage) -> None:
        """Finds no integration tests without an androidTest directory."""
        [example] = plugin.get_examples()

        assert not example_has_native_integration_tests(example)


class TestRunner:
    """Tests for AndroidRunner."""

    async def test_runs_unit_tests(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Succeeds when the unit test task passes."""
        add_unit_tests(example)
        gradlew = configure_build(example)

        result = await runner.run_tests(plugin, UNIT_ONLY)

        assert result.state == "succeeded"
        [call] = process_runner.calls
        assert call.executable == str(gradlew)
        assert call.args == ["testDebugUnitTest"]
        assert call.cwd == example / "android"

    async def test_runs_integration_tests_with_bridge_filter(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Filters out bridge tests when running instrumentation tests."""
        add_integration_tests(example, "BarTest.java")
        configure_build(example)

        result = await runner.run_tests(plugin, INTEGRATION_ONLY)

        assert result.state == "succeeded"
        [call] = process_runner.calls
        assert call.args == ["app:connectedAndroidTest", INTEGRATION_TEST_FILTER]

    async def test_runs_both_test_types(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Runs unit then integration tests."""
        add_unit_tests(example)
        add_integration_tests(example, "BarTest.java")
        configure_build(example)

        result = await runner.run_tests(plugin, BOTH)

        assert result.state == "succeeded"
        assert [c.args[0] for c in process_runner.calls] == [
            "testDebugUnitTest",
            "app:connectedAndroidTest",
        ]

    async def test_missing_unit_tests_fail(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        process_runner: FakeProcessRunner,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Fails when unit tests were requested but none ran."""
        with caplog.at_level(logging.INFO):
            result = await runner.run_tests(plugin, UNIT_ONLY)

        assert result.state == "failed"
        assert result.error is not None
        assert "No unit tests ran" in result.error
        assert "No Android unit tests found for plugin/example" in caplog.text
        assert process_runner.calls == []

    async def test_missing_integration_tests_skip(
        self, runner: AndroidRunner, plugin: RepositoryPackage, example: Path
    ) -> None:
        """Skips when only integration tests were requested and none exist."""
        add_integration_tests(example, "FooActivityTest.java")

        result = await runner.run_tests(plugin, INTEGRATION_ONLY)

        assert result.state == "skipped"

    async def test_missing_build_fails(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Fails with a build instruction before running anything."""
        add_unit_tests(example)
        add_integration_tests(example, "BarTest.java")

        with caplog.at_level(logging.ERROR):
            result = await runner.run_tests(plugin, BOTH)

        assert result.state == "failed"
        assert result.error == "Examples must be built before testing."
        assert 'flutter build apk' in caplog.text
        assert process_runner.calls == []

    async def test_unit_test_failure(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Fails when the unit test task fails."""
        add_unit_tests(example)
        gradlew = configure_build(example)
        process_runner.add_result(str(gradlew), exit_code=1)

        result = await runner.run_tests(plugin, UNIT_ONLY)

        assert result.state == "failed"
        assert result.error == "plugin/example unit tests failed"

    async def test_integration_failure_still_counts_unit_run(
        self,
        runner: AndroidRunner,
        plugin: RepositoryPackage,
        example: Path,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Reports the integration failure, not missing unit tests."""
        add_unit_tests(example)
        add_integration_tests(example, "BarTest.java")
        gradlew = configure_build(example)
        process_runner.add_result(str(gradlew), exit_code=0)
        process_runner.add_result(str(gradlew), exit_code=1)

        result = await runner.run_tests(plugin, BOTH)

        assert result.state == "failed"
        assert result.error == "plugin/example integration tests failed"

    async def test_unit_tests_in_any_example_are_enough(
        self,
        runner: AndroidRunner,
        plugin_factory: CreatePluginFn,
        process_runner: FakeProcessRunner,
    ) -> None:
        """Succeeds when only some examples have unit tests."""
        package = plugin_factory("multi", examples=["first", "second"])
        second = package.directory / "example" / "second"
        add_unit_tests(second)
        configure_build(second)

        result = await runner.run_tests(package, UNIT_ONLY)

        assert result.state == "succeeded"
        assert len(process_runner.calls) == 1

    async def test_windows_host_uses_batch_wrapper(
        self,
        process_runner: FakeProcessRunner,
        plugin: RepositoryPackage,
        example: Path,
    ) -> None:
        """Looks for gradlew.bat on Windows hosts."""
        add_unit_tests(example)
        configure_build(example)
        runner = AndroidRunner(process_runner=process_runner, host_platform="win32")

        result = await runner.run_tests(plugin, UNIT_ONLY)

        assert result.state == "failed"
        assert result.error == "Examples must be built before testing."
