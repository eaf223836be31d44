"""Shared fixtures for the test suite."""

import io

import pytest
from rich.console import Console

from concisetest.config import OutputConfig
from concisetest.core.context import RunContext
from concisetest.report.reporter import Reporter


def make_console() -> Console:
    """Create a console that records plain text."""
    return Console(file=io.StringIO(), no_color=True, highlight=False, emoji=False, soft_wrap=True, width=200)


@pytest.fixture
def reporter():
    """Create a reporter writing into in-memory buffers."""
    return Reporter(
        OutputConfig(color=False),
        console=make_console(),
        err_console=make_console(),
    )


@pytest.fixture
def context(reporter):
    """Create a fresh run context."""
    return RunContext(reporter)