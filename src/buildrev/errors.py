"""Exception definitions for revision lookups."""

from __future__ import annotations


class RevisionError(Exception):
    """Base exception for failures after a repository has been confirmed."""

    def __init__(self, message: str, command: str):
        self.message = message
        self.command = command
        super().__init__(message)


class LaunchError(RevisionError):
    """Raised when the git process could not be started at all."""

    def __init__(self, command: str, reason: str | None = None):
        message = f"failed to run `{command}`"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, command)


class CommandError(RevisionError):
    """Raised when git ran but reported a non-zero exit status."""

    def __init__(self, command: str, exit_code: int | None = None):
        self.exit_code = exit_code
        code = f" ({exit_code})" if exit_code is not None else ""
        super().__init__(f"`{command}` reported non-zero exit-status{code}", command)


class EncodingError(RevisionError):
    """Raised when command output or path bytes are not valid UTF-8."""

    def __init__(self, command: str, what: str = "output"):
        super().__init__(f"failed to read `{command}` {what} as UTF-8 string", command)
