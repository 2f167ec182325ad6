"""Error types and process exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, one per failure kind."""

    GENERAL = 1
    USAGE = 2
    AUTH = 3
    RATE_LIMIT = 4
    API = 5
    FILE_IO = 10


class ApiError(Exception):
    """A classified failure carrying a user-facing message and an exit code.

    ``status_code`` is the HTTP status that produced the error, or 0 when the
    failure did not come from an HTTP error response (blocked prompt, decode
    failure, local file error).
    """

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.GENERAL, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.message!r}, exit_code={self.exit_code.name}, "
            f"status_code={self.status_code})"
        )


class TransportError(Exception):
    """The request never produced an HTTP response (timeout, connection, bad URL)."""


class ConfigError(Exception):
    """The persisted config file could not be read or parsed."""
