"""Detection of Android tests in an example app."""

from pathlib import Path

from plugin_native_test.repository import RepositoryPackage

# Tests that bridge to Dart integration tests live in *ActivityTest.java by
# convention, and DartIntegrationTest.java defines the annotation used to
# filter them out at run time. Neither counts as a native test.
BRIDGE_TEST_SUFFIX = "ActivityTest.java"
BRIDGE_ANNOTATION_FILENAME = "DartIntegrationTest.java"


def example_has_unit_tests(example: RepositoryPackage) -> bool:
    """Check for unit tests in either the app-level or plugin-level layout."""
    app_level = example.directory / "android" / "app" / "src" / "test"
    top_level = example.directory.parent / "android" / "src" / "test"
    return app_level.is_dir() or top_level.is_dir()


def is_bridge_test(path: Path) -> bool:
    """Whether path is a test that waits for a Dart harness call.

    Such tests hang forever when run directly, since the call never comes.
    """
    return path.name.endswith(BRIDGE_TEST_SUFFIX) or (
        path.name == BRIDGE_ANNOTATION_FILENAME
    )


def example_has_native_integration_tests(example: RepositoryPackage) -> bool:
    """Check for purely native instrumentation tests.

    If the androidTest directory only holds bridge tests, there is nothing
    that can be run here.
    """
    integration_test_dir = (
        example.directory / "android" / "app" / "src" / "androidTest"
    )
    if not integration_test_dir.is_dir():
        return False
    return any(
        path.is_file() and not is_bridge_test(path)
        for path in integration_test_dir.rglob("*")
    )
