"""gh2bb exceptions."""

from typing import Optional, Sequence


class Gh2bbError(Exception):
    """Base exception for gh2bb errors."""

    pass


class ConfigurationError(Gh2bbError):
    """Required configuration is missing or invalid."""

    pass


class InvalidInputError(Gh2bbError):
    """Destination URL is not an SSH URL."""

    pass


class ParseError(Gh2bbError):
    """Repository name could not be extracted from the destination URL."""

    pass


class TempDirError(Gh2bbError):
    """Temporary working directory could not be created."""

    pass


class CommandError(Gh2bbError):
    """External command exited non-zero or could not be started."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ):
        """Initialize command error.

        Args:
            message: Error message
            command: Command line that failed
            returncode: Exit status, None if the process never started
        """
        super().__init__(message)
        self.command = list(command) if command else []
        self.returncode = returncode


class GitStepError(Gh2bbError):
    """One stage of the mirror migration failed."""

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage
