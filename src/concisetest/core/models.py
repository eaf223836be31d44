"""Data models for groups, tests, failures and run state."""

import os
import traceback
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional

from concisetest.errors import ExpectationError


Hook = Callable[[], object]

PACKAGE_DIR = str(Path(__file__).resolve().parent.parent) + os.sep


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    FAILURES = 1
    CANNOT_ACCESS_FILE = 2
    CONFIG_ERROR = 3


def _is_engine_frame(frame: traceback.FrameSummary) -> bool:
    return frame.filename.startswith(PACKAGE_DIR)


def _external_frames(frames: traceback.StackSummary) -> traceback.StackSummary:
    """Keep only the test code frames below the engine's entry point.

    Frames before the first engine frame (console script, click, pytest) and
    the engine's own and import machinery frames are dropped.
    """
    start = next((i for i, frame in enumerate(frames) if _is_engine_frame(frame)), -1)
    return traceback.StackSummary.from_list(
        [
            frame
            for frame in frames[start + 1 :]
            if not _is_engine_frame(frame) and not frame.filename.startswith("<frozen ")
        ]
    )


@dataclass
class Describe:
    """A group on the active nesting stack."""

    name: str
    befores: list[Hook] = field(default_factory=list)
    afters: list[Hook] = field(default_factory=list)


@dataclass
class Failure:
    """A captured assertion failure or unexpected exception."""

    error: BaseException
    message: str
    stack: Optional[traceback.StackSummary] = None

    @property
    def is_assertion(self) -> bool:
        """Check if this failure came from a matcher."""
        return isinstance(self.error, ExpectationError)

    @classmethod
    def from_expectation(cls, error: ExpectationError) -> "Failure":
        """Wrap a matcher failure, recording the caller's stack."""
        return cls(
            error=error,
            message=error.message,
            stack=_external_frames(traceback.extract_stack()),
        )

    @classmethod
    def from_exception(cls, error: BaseException) -> "Failure":
        """Wrap an exception that escaped a hook or test body."""
        if isinstance(error, ExpectationError):
            message = error.message
        else:
            message = f"{type(error).__name__}: {error}"

        return cls(
            error=error,
            message=message,
            stack=_external_frames(traceback.extract_tb(error.__traceback__)),
        )


@dataclass
class TestCase:
    """A leaf test and the errors recorded while running it."""

    name: str
    describe_names: list[str] = field(default_factory=list)
    errors: list[Failure] = field(default_factory=list)

    @property
    def path(self) -> list[str]:
        """Get the breadcrumb path: ancestor group names plus the test name."""
        return [*self.describe_names, self.name]

    @property
    def passed(self) -> bool:
        """Check if the test recorded no errors."""
        return not self.errors


@dataclass
class RunState:
    """Running totals for a single run."""

    successes: int = 0
    failures: list[TestCase] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Get the number of tests executed so far."""
        return self.successes + len(self.failures)

    @property
    def exit_code(self) -> ExitCode:
        """Derive the exit code from the failure list."""
        return ExitCode.FAILURES if self.failures else ExitCode.OK
