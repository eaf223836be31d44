"""Test run orchestration."""

from pathlib import Path
from typing import Optional

from concisetest.config import ConciseConfig
from concisetest.core.context import RunContext
from concisetest.core.discovery import TestDiscovery
from concisetest.core.loader import load_test_file
from concisetest.core.models import ExitCode, RunState
from concisetest.errors import CannotAccessFileError
from concisetest.matchers import MatcherRegistry
from concisetest.report.reporter import Reporter


class TestRunner:
    """Loads test files, then reports and derives the exit code."""

    def __init__(
        self,
        config: ConciseConfig,
        base_dir: Path,
        reporter: Optional[Reporter] = None,
        registry: Optional[MatcherRegistry] = None,
    ):
        """Initialize the test runner."""
        self.config = config
        self.base_dir = base_dir
        self.reporter = reporter or Reporter(config.output)
        self.registry = registry
        self.discovery = TestDiscovery(config, base_dir)

    def run(self, file_path: Optional[str] = None) -> ExitCode:
        """Run a single test file, or every discovered one.

        Errors raised while loading files (outside any test) are printed and
        stop further loading, but the failures and summary are still printed.
        """
        try:
            test_files = self.discovery.choose_test_files(file_path)
        except CannotAccessFileError as e:
            self.reporter.cannot_access_file(str(e.path))
            return ExitCode.CANNOT_ACCESS_FILE
        except Exception as e:
            test_files = []
            self.reporter.print_error(e)

        context = RunContext(self.reporter, self.registry)
        try:
            for test_file in test_files:
                load_test_file(test_file, context, self.base_dir)
        except Exception as e:
            self.reporter.print_error(e)

        return self.finish(context.state)

    def finish(self, state: RunState) -> ExitCode:
        """Print the failures and tally, and return the run's exit code."""
        self.reporter.print_failures(state)
        self.reporter.print_summary(state)
        return state.exit_code
