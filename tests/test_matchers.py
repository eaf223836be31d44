"""Tests for the matcher registry and default matchers."""

import pytest

from concisetest.errors import ExpectationError, UnknownMatcherError
from concisetest.matchers import (
    MatcherKind,
    MatcherRegistry,
    default_registry,
    to_be,
    to_contain,
    to_equal,
    to_have_length,
    to_raise,
)


class TestMatcherRegistry:
    """Tests for MatcherRegistry."""

    def test_default_registry_has_every_kind(self):
        """Test that every MatcherKind has a default matcher."""
        registry = default_registry()
        for kind in MatcherKind:
            assert kind in registry

    def test_get_by_kind_and_name(self):
        """Test looking up a matcher by enum member or plain name."""
        registry = default_registry()
        assert registry.get(MatcherKind.EQUAL) is to_equal
        assert registry.get("to_equal") is to_equal

    def test_unknown_matcher(self):
        """Test that an unregistered name raises UnknownMatcherError."""
        registry = default_registry()
        with pytest.raises(UnknownMatcherError) as exc_info:
            registry.get("to_be_shiny")

        assert exc_info.value.name == "to_be_shiny"
        assert isinstance(exc_info.value, LookupError)

    def test_register_custom_matcher(self):
        """Test registering a matcher under a custom name."""
        registry = MatcherRegistry()

        def to_be_even(actual):
            if actual % 2:
                raise ExpectationError(f"Expected {actual} to be even")

        registry.register("to_be_even", to_be_even)

        assert "to_be_even" in registry
        assert registry.names() == ["to_be_even"]

    def test_copy_is_independent(self):
        """Test that copies do not share registrations."""
        registry = default_registry()
        copy = registry.copy()
        copy.register("extra", lambda actual: None)

        assert "extra" in copy
        assert "extra" not in registry


class TestDefaultMatchers:
    """Tests for the default matcher functions."""

    def test_to_equal(self):
        """Test equality matcher."""
        to_equal(2, 2)
        with pytest.raises(ExpectationError) as exc_info:
            to_equal(2, 3)

        assert exc_info.value.message == "Expected 2 to equal 3"
        assert exc_info.value.actual == 2
        assert exc_info.value.expected == 3
        assert exc_info.value.has_values

    def test_to_be_identity(self):
        """Test that to_be compares identity, not equality."""
        value = [1]
        to_be(value, value)
        with pytest.raises(ExpectationError):
            to_be([1], [1])

    @pytest.mark.parametrize(
        "kind,actual",
        [
            (MatcherKind.BE_TRUTHY, 0),
            (MatcherKind.BE_FALSY, "x"),
            (MatcherKind.BE_NONE, 0),
            (MatcherKind.BE_DEFINED, None),
        ],
    )
    def test_single_value_matchers_fail(self, kind, actual):
        """Test that single-value matchers fail on mismatching values."""
        matcher = default_registry().get(kind)
        with pytest.raises(ExpectationError) as exc_info:
            matcher(actual)

        assert not exc_info.value.has_values

    def test_to_contain(self):
        """Test containment matcher."""
        to_contain([1, 2, 3], 2)
        to_contain("hello", "ell")
        with pytest.raises(ExpectationError, match="to contain 4"):
            to_contain([1, 2, 3], 4)

    def test_to_have_length(self):
        """Test length matcher."""
        to_have_length("abc", 3)
        with pytest.raises(ExpectationError, match="has length 3"):
            to_have_length("abc", 2)

    def test_to_have_length_without_len(self):
        """Test length matcher on a value without a length."""
        with pytest.raises(ExpectationError, match="to have a length"):
            to_have_length(42, 1)

    def test_comparisons(self):
        """Test greater-than and less-than matchers."""
        registry = default_registry()
        registry.get(MatcherKind.BE_GREATER_THAN)(3, 2)
        registry.get(MatcherKind.BE_LESS_THAN)(2, 3)
        with pytest.raises(ExpectationError):
            registry.get(MatcherKind.BE_GREATER_THAN)(2, 2)

    def test_to_be_instance_of(self):
        """Test instance matcher."""
        matcher = default_registry().get(MatcherKind.BE_INSTANCE_OF)
        matcher(True, int)
        with pytest.raises(ExpectationError, match="but it is str"):
            matcher("1", int)


class TestToRaise:
    """Tests for the to_raise matcher."""

    def test_passes_when_expected_type_raised(self):
        """Test a callable raising the expected exception."""

        def boom():
            raise ValueError("bad value")

        to_raise(boom, ValueError)
        to_raise(boom, ValueError, match="bad")

    def test_fails_when_nothing_raised(self):
        """Test a callable that returns normally."""
        with pytest.raises(ExpectationError, match="nothing was raised"):
            to_raise(lambda: None, ValueError)

    def test_fails_on_other_type(self):
        """Test a callable raising a different exception type."""

        def boom():
            raise KeyError("k")

        with pytest.raises(ExpectationError, match="but KeyError was raised"):
            to_raise(boom, ValueError)

    def test_fails_on_message_mismatch(self):
        """Test a callable whose exception message does not match."""

        def boom():
            raise ValueError("bad value")

        with pytest.raises(ExpectationError, match="to contain 'other'"):
            to_raise(boom, ValueError, match="other")

    def test_system_exit_can_be_expected(self):
        """Test expecting an exception outside the Exception hierarchy."""

        def leave():
            raise SystemExit(3)

        to_raise(leave, SystemExit)

    def test_unexpected_keyboard_interrupt_propagates(self):
        """Test that an interrupt is not turned into an assertion failure."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            to_raise(interrupt, ValueError)
