"""Wrapper around the Xcode command line tools."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from plugin_native_test.models.xcode import SimulatorList, XcodeBuildList
from plugin_native_test.process_runner import ProcessRunner

log = logging.getLogger(__name__)

XCRUN = "xcrun"
XCODEBUILD = "xcodebuild"


@dataclass(frozen=True, kw_only=True)
class Xcode:
    """Runs xcodebuild and simctl through xcrun."""

    process_runner: ProcessRunner

    async def run_xcodebuild(
        self,
        directory: Path,
        *,
        actions: Sequence[str] = ("build",),
        workspace: str | None = None,
        scheme: str | None = None,
        configuration: str | None = None,
        extra_flags: Sequence[str] = (),
    ) -> int:
        """Run xcodebuild in directory, streaming output, and return its exit code."""
        args = [XCODEBUILD, *actions]
        if workspace is not None:
            args.extend(["-workspace", workspace])
        if scheme is not None:
            args.extend(["-scheme", scheme])
        if configuration is not None:
            args.extend(["-configuration", configuration])
        args.extend(extra_flags)
        return await self.process_runner.run_and_stream(XCRUN, args, cwd=directory)

    async def project_has_target(self, project: Path, target: str) -> bool | None:
        """Check whether an Xcode project defines the given target.

        Args:
            project: Path to the .xcodeproj
            target: Target name (e.g., "RunnerTests")

        Returns:
            True or False, or None if the project's targets can't be determined.

        """
        result = await self.process_runner.run(
            XCRUN, [XCODEBUILD, "-list", "-json", "-project", str(project)]
        )
        if result.exit_code != 0:
            log.debug("xcodebuild -list failed for %s: %s", project, result.stderr)
            return None

        try:
            build_list = XcodeBuildList.model_validate_json(result.stdout)
        except ValidationError:
            log.debug("Unparseable xcodebuild -list output for %s", project)
            return None

        if build_list.project is None:
            return None
        return target in build_list.project.targets

    async def find_best_available_iphone_simulator(self) -> str | None:
        """Find the simulator with the newest iOS runtime.

        Returns:
            The simulator's UDID, or None if there is no usable simulator.

        """
        args = ["simctl", "list", "devices", "runtimes", "available", "--json"]
        result = await self.process_runner.run(XCRUN, args)
        if result.exit_code != 0:
            log.error(
                'Error occurred while running "%s %s":\n%s',
                XCRUN,
                " ".join(args),
                result.stderr,
            )
            return None

        try:
            simulators = SimulatorList.model_validate_json(result.stdout)
        except ValidationError:
            log.error("Unable to parse simulator list")
            return None

        # Runtimes are listed oldest first, and devices oldest model first.
        for runtime in reversed(simulators.runtimes):
            if runtime.name is None or "iOS" not in runtime.name:
                continue
            if runtime.identifier is None:
                continue
            for device in reversed(simulators.devices.get(runtime.identifier, [])):
                if device.udid is None:
                    continue
                log.info("Device selected: %s (%s)", device.name, device.udid)
                return device.udid

        return None
