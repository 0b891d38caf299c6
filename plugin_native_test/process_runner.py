"""Subprocess execution for external toolchains."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ProcessOutput:
    """Captured result of a finished process."""

    exit_code: int
    stdout: str
    stderr: str


@dataclass(frozen=True, kw_only=True)
class ProcessRunner:
    """Runs external commands to completion, one at a time."""

    async def run(
        self,
        executable: str,
        args: Sequence[str],
        cwd: Path | None = None,
    ) -> ProcessOutput:
        """Run a command and capture its output."""
        log.debug("Running (captured): %s %s", executable, " ".join(args))
        process = await asyncio.create_subprocess_exec(
            executable,
            *args,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        return ProcessOutput(
            exit_code=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )

    async def run_and_stream(
        self,
        executable: str,
        args: Sequence[str],
        cwd: Path | None = None,
    ) -> int:
        """Run a command with its output going straight to this process's.

        Returns:
            The command's exit code

        """
        log.info("Running command: %s %s", executable, " ".join(args))
        process = await asyncio.create_subprocess_exec(executable, *args, cwd=cwd)
        await process.wait()
        return process.returncode if process.returncode is not None else -1
