"""Runs a single leaf test with its inherited hooks."""

from typing import TYPE_CHECKING, Callable, Optional

from concisetest.core.models import Failure, Hook, RunState, TestCase
from concisetest.core.tree import TestTree

if TYPE_CHECKING:
    from concisetest.report.reporter import Reporter


def invoke_all(hooks: list[Hook]) -> None:
    """Call each hook in order."""
    for hook in hooks:
        hook()


class TestExecutor:
    """Executes tests immediately as they are registered."""

    def __init__(
        self,
        tree: TestTree,
        state: RunState,
        reporter: Optional["Reporter"] = None,
    ):
        """Initialize the executor.

        Args:
            tree: Group stack the test's hooks and path come from
            state: Run totals to update with each result
            reporter: Receives a pass/fail line for every test
        """
        self.tree = tree
        self.state = state
        self.reporter = reporter
        self.current_test: Optional[TestCase] = None

    def run_test(self, name: str, body: Callable[[], object]) -> TestCase:
        """Run before hooks, the body and after hooks, then classify the test.

        An exception from any of them is recorded as a failure and skips the
        rest of the test, after hooks included. Assertion failures recorded
        by ``expect()`` do not stop the body.
        """
        test = TestCase(name=name, describe_names=self.tree.names())
        previous, self.current_test = self.current_test, test

        try:
            invoke_all(self.tree.befores())
            body()
            invoke_all(self.tree.afters())
        except Exception as e:
            test.errors.append(Failure.from_exception(e))
        finally:
            self.current_test = previous

        self._classify(test)
        return test

    def _classify(self, test: TestCase) -> None:
        depth = self.tree.depth
        if test.passed:
            self.state.successes += 1
            if self.reporter:
                self.reporter.test_passed(test, depth)
        else:
            self.state.failures.append(test)
            if self.reporter:
                self.reporter.test_failed(test, depth)
