"""Models describing what a run should test."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from pydantic import Field, model_validator

from plugin_native_test.errors import InvalidArgumentsError
from plugin_native_test.models.base import Model


class Platform(StrEnum):
    """A platform that native tests can be run for."""

    ANDROID = "android"
    IOS = "ios"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @property
    def label(self) -> str:
        """Name to use for the platform in output."""
        return PLATFORM_LABELS[self]


PLATFORM_LABELS = {
    Platform.ANDROID: "Android",
    Platform.IOS: "iOS",
    Platform.LINUX: "Linux",
    Platform.MACOS: "macOS",
    Platform.WINDOWS: "Windows",
}


@dataclass(frozen=True, kw_only=True)
class TestMode:
    """Enabled state for the different test types."""

    __test__ = False

    unit: bool
    integration: bool

    @property
    def unit_only(self) -> bool:
        return self.unit and not self.integration

    @property
    def integration_only(self) -> bool:
        return self.integration and not self.unit


class ExecutionPlan(Model):
    """Normalized set of platforms and test types requested for a run."""

    platforms: frozenset[Platform] = Field(
        ..., description="Platforms to run tests for"
    )
    unit: bool = Field(default=True, description="Run native unit tests")
    integration: bool = Field(
        default=True, description="Run native integration (UI) tests"
    )

    @model_validator(mode="after")
    def check_combination(self) -> Self:
        """Reject plans that could never run anything."""
        if not self.platforms:
            raise InvalidArgumentsError("At least one platform flag must be provided.")
        if not (self.unit or self.integration):
            raise InvalidArgumentsError("At least one test type must be enabled.")
        return self

    @property
    def sorted_platforms(self) -> Sequence[Platform]:
        """Requested platforms in name order, which is the order they run in."""
        return sorted(self.platforms, key=lambda platform: platform.value)

    @property
    def mode(self) -> TestMode:
        return TestMode(unit=self.unit, integration=self.integration)
