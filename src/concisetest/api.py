"""Registration functions imported by test files.

Each function forwards to the run context that is active while the runner
loads a test file::

    from concisetest import describe, expect, it

    @describe("Math")
    def _():
        @it("adds")
        def _():
            expect(1 + 1).to_equal(2)
"""

from typing import Any, Optional

from concisetest.core.context import Body, active_context
from concisetest.core.expect import Expectation
from concisetest.core.models import Hook


def describe(name: str, body: Optional[Body] = None) -> Any:
    return active_context().describe(name, body)


def it(name: str, body: Optional[Body] = None) -> Any:
    return active_context().it(name, body)


def before_each(hook: Hook) -> Hook:
    return active_context().before_each(hook)


def after_each(hook: Hook) -> Hook:
    return active_context().after_each(hook)


def expect(actual: Any) -> Expectation:
    return active_context().expect(actual)
