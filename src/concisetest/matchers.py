"""Matcher registry and the default set of matchers.

A matcher is a plain function ``matcher(actual, *expected)`` that returns
normally when the assertion holds and raises ``ExpectationError`` when it
does not. The registry maps matcher names to those functions so the set of
assertions can grow without touching the engine.
"""

from enum import Enum
from typing import Any, Callable, Optional

from concisetest.errors import ExpectationError, UnknownMatcherError


Matcher = Callable[..., None]


class MatcherKind(str, Enum):
    """Assertion kinds shipped with the default registry."""

    EQUAL = "to_equal"
    BE = "to_be"
    BE_TRUTHY = "to_be_truthy"
    BE_FALSY = "to_be_falsy"
    BE_NONE = "to_be_none"
    BE_DEFINED = "to_be_defined"
    CONTAIN = "to_contain"
    HAVE_LENGTH = "to_have_length"
    BE_INSTANCE_OF = "to_be_instance_of"
    BE_GREATER_THAN = "to_be_greater_than"
    BE_LESS_THAN = "to_be_less_than"
    RAISE = "to_raise"


def _kind_name(kind: MatcherKind | str) -> str:
    return kind.value if isinstance(kind, MatcherKind) else kind


class MatcherRegistry:
    """Maps matcher names to matcher functions."""

    def __init__(self, matchers: Optional[dict[str, Matcher]] = None):
        self._matchers: dict[str, Matcher] = dict(matchers or {})

    def register(self, kind: MatcherKind | str, matcher: Matcher) -> Matcher:
        """Register (or replace) the matcher for a kind."""
        self._matchers[_kind_name(kind)] = matcher
        return matcher

    def get(self, kind: MatcherKind | str) -> Matcher:
        """Look up a matcher, raising UnknownMatcherError if it is missing."""
        name = _kind_name(kind)
        try:
            return self._matchers[name]
        except KeyError:
            raise UnknownMatcherError(name) from None

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (MatcherKind, str)):
            return False
        return _kind_name(kind) in self._matchers

    def names(self) -> list[str]:
        """Get the registered matcher names, sorted."""
        return sorted(self._matchers)

    def copy(self) -> "MatcherRegistry":
        """Return an independent registry with the same matchers."""
        return MatcherRegistry(self._matchers)


def to_equal(actual: Any, expected: Any) -> None:
    if actual != expected:
        raise ExpectationError(
            f"Expected {actual!r} to equal {expected!r}",
            actual=actual,
            expected=expected,
        )


def to_be(actual: Any, expected: Any) -> None:
    if actual is not expected:
        raise ExpectationError(
            f"Expected {actual!r} to be the same object as {expected!r}",
            actual=actual,
            expected=expected,
        )


def to_be_truthy(actual: Any) -> None:
    if not actual:
        raise ExpectationError(f"Expected {actual!r} to be truthy")


def to_be_falsy(actual: Any) -> None:
    if actual:
        raise ExpectationError(f"Expected {actual!r} to be falsy")


def to_be_none(actual: Any) -> None:
    if actual is not None:
        raise ExpectationError(f"Expected {actual!r} to be None")


def to_be_defined(actual: Any) -> None:
    if actual is None:
        raise ExpectationError("Expected value to be defined, but it was None")


def to_contain(actual: Any, item: Any) -> None:
    if item not in actual:
        raise ExpectationError(
            f"Expected {actual!r} to contain {item!r}",
            actual=actual,
            expected=item,
        )


def to_have_length(actual: Any, length: int) -> None:
    try:
        actual_length = len(actual)
    except TypeError:
        raise ExpectationError(f"Expected {actual!r} to have a length") from None

    if actual_length != length:
        raise ExpectationError(
            f"Expected {actual!r} to have length {length}, but it has length {actual_length}",
            actual=actual_length,
            expected=length,
        )


def to_be_instance_of(actual: Any, expected_type: type) -> None:
    if not isinstance(actual, expected_type):
        raise ExpectationError(
            f"Expected {actual!r} to be an instance of {expected_type.__name__}, "
            f"but it is {type(actual).__name__}",
            actual=type(actual),
            expected=expected_type,
        )


def to_be_greater_than(actual: Any, bound: Any) -> None:
    if not actual > bound:
        raise ExpectationError(
            f"Expected {actual!r} to be greater than {bound!r}",
            actual=actual,
            expected=bound,
        )


def to_be_less_than(actual: Any, bound: Any) -> None:
    if not actual < bound:
        raise ExpectationError(
            f"Expected {actual!r} to be less than {bound!r}",
            actual=actual,
            expected=bound,
        )


def to_raise(
    actual: Callable[[], Any],
    expected_type: type[BaseException] = Exception,
    match: Optional[str] = None,
) -> None:
    """Call ``actual`` and check that it raises ``expected_type``.

    If ``match`` is given, it must also appear in the exception message.
    Exceptions outside ``Exception`` (``SystemExit``, ``KeyboardInterrupt``)
    only count when ``expected_type`` names them; otherwise they propagate.
    """
    try:
        actual()
    except BaseException as e:
        if not isinstance(e, expected_type):
            if not isinstance(e, Exception):
                raise
            raise ExpectationError(
                f"Expected {expected_type.__name__} to be raised, "
                f"but {type(e).__name__} was raised: {e}",
                actual=type(e),
                expected=expected_type,
            ) from None
        if match is not None and match not in str(e):
            raise ExpectationError(
                f"Expected {type(e).__name__} message {str(e)!r} to contain {match!r}",
                actual=str(e),
                expected=match,
            ) from None
        return

    raise ExpectationError(f"Expected {expected_type.__name__} to be raised, but nothing was raised")


DEFAULT_MATCHERS: dict[MatcherKind, Matcher] = {
    MatcherKind.EQUAL: to_equal,
    MatcherKind.BE: to_be,
    MatcherKind.BE_TRUTHY: to_be_truthy,
    MatcherKind.BE_FALSY: to_be_falsy,
    MatcherKind.BE_NONE: to_be_none,
    MatcherKind.BE_DEFINED: to_be_defined,
    MatcherKind.CONTAIN: to_contain,
    MatcherKind.HAVE_LENGTH: to_have_length,
    MatcherKind.BE_INSTANCE_OF: to_be_instance_of,
    MatcherKind.BE_GREATER_THAN: to_be_greater_than,
    MatcherKind.BE_LESS_THAN: to_be_less_than,
    MatcherKind.RAISE: to_raise,
}


def default_registry() -> MatcherRegistry:
    """Return a fresh registry holding the default matchers."""
    return MatcherRegistry({kind.value: fn for kind, fn in DEFAULT_MATCHERS.items()})
