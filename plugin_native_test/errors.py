"""Errors that abort a whole run."""

EXIT_COMMAND_FOUND_ERRORS = 1
EXIT_INVALID_ARGUMENTS = 2
EXIT_NO_IOS_SIMULATORS = 3


class ToolExit(Exception):
    """Raised to stop the run with a specific process exit code."""

    exit_code: int = EXIT_COMMAND_FOUND_ERRORS

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidArgumentsError(ToolExit):
    """Raised when the requested flags cannot form a valid execution plan."""

    exit_code = EXIT_INVALID_ARGUMENTS


class NoSimulatorAvailableError(ToolExit):
    """Raised when iOS tests are requested but no simulator can be found."""

    exit_code = EXIT_NO_IOS_SIMULATORS
