"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

RunState = Literal["succeeded", "failed", "skipped"]
PackageState = Literal["success", "failure", "skip", "excluded"]


@dataclass(frozen=True, kw_only=True)
class PlatformResult:
    """Result of running a single platform's tests for one package.

    The state should be:
    - failed if any tests failed.
    - succeeded if at least one test ran, and all tests passed.
    - skipped if no tests ran.

    The error is only meaningful when the state is failed.
    """

    state: RunState
    error: str | None = None

    @classmethod
    def succeeded(cls) -> "PlatformResult":
        return cls(state="succeeded")

    @classmethod
    def failed(cls, error: str | None = None) -> "PlatformResult":
        return cls(state="failed", error=error)

    @classmethod
    def skipped(cls) -> "PlatformResult":
        return cls(state="skipped")

    @property
    def ran(self) -> bool:
        """Whether any test actually executed (or failed trying to)."""
        return self.state != "skipped"


def combine_states(current: RunState, outcome: RunState) -> RunState:
    """Fold one more outcome into an accumulated state.

    A failure is sticky, a success replaces a skip, and a skip never changes
    anything.
    """
    if current == "failed" or outcome == "failed":
        return "failed"
    if current == "succeeded" or outcome == "succeeded":
        return "succeeded"
    return "skipped"


@dataclass(frozen=True, kw_only=True)
class PackageResult:
    """Overall result of testing one package across all requested platforms."""

    state: PackageState
    details: Sequence[str] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> "PackageResult":
        return cls(state="success")

    @classmethod
    def fail(cls, errors: Sequence[str] = ()) -> "PackageResult":
        return cls(state="failure", details=tuple(errors))

    @classmethod
    def skip(cls, reason: str) -> "PackageResult":
        return cls(state="skip", details=(reason,))

    @classmethod
    def excluded(cls) -> "PackageResult":
        return cls(state="excluded")
