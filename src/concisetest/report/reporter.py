"""Console reporting using rich."""

import traceback
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from concisetest.config import OutputConfig
from concisetest.core.models import Failure, RunState, TestCase


TraceFormatter = Callable[[Failure], Optional[str]]

TICK = "✓"
CROSS = "✗"


def format_trace(failure: Failure) -> Optional[str]:
    """Render a failure's stack in the standard traceback layout."""
    if not failure.stack:
        return None
    return "".join(traceback.format_list(failure.stack)).rstrip("\n")


class Reporter:
    """Prints live test status, the failures digest and the final tally."""

    def __init__(
        self,
        output: Optional[OutputConfig] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        trace_formatter: TraceFormatter = format_trace,
    ):
        """Initialize the reporter.

        Args:
            output: Output settings (indentation, separator, color, traces)
            console: Console for live lines and the summary (default: stdout)
            err_console: Console for failures and errors (default: stderr)
            trace_formatter: Turns a failure's stack into printable text
        """
        self.output = output or OutputConfig()
        no_color = not self.output.color
        self.console = console or Console(no_color=no_color, highlight=False, emoji=False, soft_wrap=True)
        self.err_console = err_console or Console(
            stderr=True, no_color=no_color, highlight=False, emoji=False, soft_wrap=True
        )
        self.trace_formatter = trace_formatter

    def _indent(self, message: str, depth: int) -> str:
        return f"{' ' * (depth * self.output.indent_width)}{message}"

    def group_entered(self, name: str, depth: int) -> None:
        """Print a group name at its parent's nesting depth."""
        self.console.print(self._indent(escape(name), depth))

    def test_passed(self, test: TestCase, depth: int) -> None:
        """Print the live line for a passing test."""
        self.console.print(self._indent(f"[green]{TICK}[/green] {escape(test.name)}", depth))

    def test_failed(self, test: TestCase, depth: int) -> None:
        """Print the live line for a failing test."""
        self.console.print(self._indent(f"[red]{CROSS}[/red] {escape(test.name)}", depth))

    def full_test_description(self, test: TestCase) -> str:
        """Get the breadcrumb path with every segment in bold."""
        return escape(self.output.separator).join(f"[bold]{escape(name)}[/bold]" for name in test.path)

    def print_failure(self, test: TestCase) -> None:
        """Print one failed test: its path, then each error's message and trace."""
        self.err_console.print(self.full_test_description(test))
        for failure in test.errors:
            self.err_console.print(failure.message, markup=False)
            if self.output.show_traces:
                trace = self.trace_formatter(failure)
                if trace:
                    self.err_console.print(trace, markup=False)
        self.err_console.print("")

    def print_failures(self, state: RunState) -> None:
        """Print the failures section, if anything failed."""
        if state.failures:
            self.err_console.print("")
            self.err_console.print("Failures:")
            self.err_console.print("")

        for test in state.failures:
            self.print_failure(test)

    def print_summary(self, state: RunState) -> None:
        """Print the one-line tally."""
        self.console.print(
            f"[green]{state.successes}[/green] tests passed, "
            f"[red]{len(state.failures)}[/red] tests failed."
        )

    def print_error(self, error: BaseException) -> None:
        """Print an error that escaped test loading."""
        self.err_console.print(str(error), markup=False)
        self.err_console.print(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n"),
            markup=False,
        )

    def cannot_access_file(self, path: str) -> None:
        """Print the message for an inaccessible single test file."""
        self.err_console.print(f"File {path} could not be accessed.", markup=False)
