"""Pydantic models for Xcode command line tool JSON output."""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field


class SimulatorRuntime(BaseModel):
    """A runtime from `simctl list runtimes --json`."""

    name: str | None = None
    identifier: str | None = None
    version: str | None = None


class SimulatorDevice(BaseModel):
    """A device from `simctl list devices --json`."""

    udid: str | None = None
    name: str | None = None


class SimulatorList(BaseModel):
    """Combined output of `simctl list devices runtimes available --json`."""

    runtimes: Sequence[SimulatorRuntime] = Field(default_factory=list)
    devices: Mapping[str, Sequence[SimulatorDevice]] = Field(default_factory=dict)


class XcodeProjectInfo(BaseModel):
    """The project section of `xcodebuild -list -json`."""

    name: str | None = None
    targets: Sequence[str] = Field(default_factory=list)
    schemes: Sequence[str] = Field(default_factory=list)


class XcodeBuildList(BaseModel):
    """Output of `xcodebuild -list -json -project <path>`."""

    project: XcodeProjectInfo | None = None
