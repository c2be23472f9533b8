"""Error kinds raised by nanny commands.

Each kind carries the process exit code the CLI maps it to, so drivers
never call sys.exit themselves.
"""

import pathlib as _pathlib


class NannyError(Exception):
    """Base class for all expected nanny failures."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class MalformedInputError(NannyError):
    """A required input could not be parsed, or its root is not an object."""

    def __init__(self, path: _pathlib.Path | str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to read/parse {path}: {message}", exit_code=1)


class MissingResourceError(NannyError):
    """A mandatory input file does not exist."""

    def __init__(self, path: _pathlib.Path | str, what: str) -> None:
        self.path = path
        super().__init__(f"{what} not found: {path}", exit_code=2)


class DriftDetectedError(NannyError):
    """Check mode found persisted output missing or out of date.

    This is an expected outcome in CI, not an internal error.
    """

    def __init__(self, path: _pathlib.Path | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"CHECK FAILED: {reason}", exit_code=1)
