"""Per-run state and the registration API bound to it."""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Optional

from concisetest.core.executor import TestExecutor
from concisetest.core.expect import Expectation
from concisetest.core.models import Hook, RunState, TestCase
from concisetest.core.tree import TestTree
from concisetest.errors import RegistrationError
from concisetest.matchers import MatcherRegistry, default_registry
from concisetest.report.reporter import Reporter


Body = Callable[[], object]


class RunContext:
    """Owns everything a single run mutates.

    Groups and tests run synchronously as they are registered: ``describe``
    runs its body straight away and ``it`` runs the test before returning.
    Both can also be used as decorators on a zero-argument function.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        registry: Optional[MatcherRegistry] = None,
    ):
        self.reporter = reporter or Reporter()
        self.registry = registry or default_registry()
        self.state = RunState()
        self.tree = TestTree(on_enter=self.reporter.group_entered)
        self.executor = TestExecutor(self.tree, self.state, self.reporter)

    def describe(self, name: str, body: Optional[Body] = None) -> Any:
        """Run ``body`` as a named group of tests."""
        if body is None:

            def decorator(fn: Body) -> Body:
                self.tree.enter_group(name, fn)
                return fn

            return decorator

        self.tree.enter_group(name, body)
        return None

    def it(self, name: str, body: Optional[Body] = None) -> Any:
        """Run ``body`` as a test inside the current group."""
        if body is None:

            def decorator(fn: Body) -> Body:
                self.executor.run_test(name, fn)
                return fn

            return decorator

        return self.executor.run_test(name, body)

    def before_each(self, hook: Hook) -> Hook:
        """Run ``hook`` before every test nested in the current group."""
        return self.tree.add_before(hook)

    def after_each(self, hook: Hook) -> Hook:
        """Run ``hook`` after every test nested in the current group."""
        return self.tree.add_after(hook)

    def expect(self, actual: Any) -> Expectation:
        """Start an assertion about ``actual`` for the running test."""
        return Expectation(actual, self.registry, self._current_test)

    def _current_test(self) -> Optional[TestCase]:
        return self.executor.current_test


_active_context: ContextVar[Optional[RunContext]] = ContextVar("concisetest_context", default=None)


@contextmanager
def activate(context: RunContext) -> Iterator[RunContext]:
    """Make ``context`` receive registrations for the duration of the block."""
    token = _active_context.set(context)
    try:
        yield context
    finally:
        _active_context.reset(token)


def active_context() -> RunContext:
    """Get the context test files are registering into."""
    context = _active_context.get()
    if context is None:
        raise RegistrationError("No test run is active; run test files with the concise command")
    return context
