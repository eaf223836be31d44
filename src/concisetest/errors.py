"""Exception types raised by the test engine."""

from pathlib import Path
from typing import Any


class ConciseTestError(Exception):
    """Base class for all engine errors."""

    pass


class ExpectationError(ConciseTestError):
    """Raised by a matcher when the actual value does not match.

    This is the only error the assertion dispatcher records and swallows;
    every other exception aborts the running test.
    """

    _MISSING = object()

    def __init__(self, message: str, actual: Any = _MISSING, expected: Any = _MISSING):
        super().__init__(message)
        self.message = message
        self.actual = actual
        self.expected = expected

    @property
    def has_values(self) -> bool:
        """Whether the matcher attached the compared values."""
        return self.actual is not self._MISSING and self.expected is not self._MISSING


class RegistrationError(ConciseTestError):
    """Raised when the registration API is used outside a valid scope."""

    pass


class UnknownMatcherError(ConciseTestError, LookupError):
    """Raised when an assertion names a matcher that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"No matcher registered for '{name}'")
        self.name = name


class CannotAccessFileError(ConciseTestError):
    """Raised when the single test file given on the command line is missing."""

    def __init__(self, path: Path | str):
        super().__init__(f"File {path} could not be accessed.")
        self.path = path
