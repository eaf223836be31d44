"""Assertion dispatch from ``expect(actual)`` to the matcher registry."""

from typing import Any, Callable, Optional

from concisetest.core.models import Failure, TestCase
from concisetest.errors import ExpectationError, RegistrationError
from concisetest.matchers import MatcherKind, MatcherRegistry


class Expectation:
    """Assertions about a single actual value.

    Matcher failures are appended to the running test and swallowed, so a
    test body keeps going and reports every failing assertion. Any other
    exception raised by a matcher propagates unchanged.
    """

    def __init__(
        self,
        actual: Any,
        registry: MatcherRegistry,
        current_test: Callable[[], Optional[TestCase]],
    ):
        self.actual = actual
        self._registry = registry
        self._current_test = current_test

    def to(self, kind: MatcherKind | str, *expected: Any, **options: Any) -> "Expectation":
        """Check ``actual`` with the matcher registered for ``kind``."""
        test = self._current_test()
        if test is None:
            raise RegistrationError("expect() can only be used while a test is running")

        matcher = self._registry.get(kind)
        try:
            matcher(self.actual, *expected, **options)
        except ExpectationError as e:
            test.errors.append(Failure.from_expectation(e))
        return self

    def to_equal(self, expected: Any) -> "Expectation":
        return self.to(MatcherKind.EQUAL, expected)

    def to_be(self, expected: Any) -> "Expectation":
        return self.to(MatcherKind.BE, expected)

    def to_be_truthy(self) -> "Expectation":
        return self.to(MatcherKind.BE_TRUTHY)

    def to_be_falsy(self) -> "Expectation":
        return self.to(MatcherKind.BE_FALSY)

    def to_be_none(self) -> "Expectation":
        return self.to(MatcherKind.BE_NONE)

    def to_be_defined(self) -> "Expectation":
        return self.to(MatcherKind.BE_DEFINED)

    def to_contain(self, item: Any) -> "Expectation":
        return self.to(MatcherKind.CONTAIN, item)

    def to_have_length(self, length: int) -> "Expectation":
        return self.to(MatcherKind.HAVE_LENGTH, length)

    def to_be_instance_of(self, expected_type: type) -> "Expectation":
        return self.to(MatcherKind.BE_INSTANCE_OF, expected_type)

    def to_be_greater_than(self, bound: Any) -> "Expectation":
        return self.to(MatcherKind.BE_GREATER_THAN, bound)

    def to_be_less_than(self, bound: Any) -> "Expectation":
        return self.to(MatcherKind.BE_LESS_THAN, bound)

    def to_raise(
        self,
        expected_type: type[BaseException] = Exception,
        match: Optional[str] = None,
    ) -> "Expectation":
        """Check that calling ``actual`` raises ``expected_type``."""
        return self.to(MatcherKind.RAISE, expected_type, match=match)
