"""Tests for the group stack and hook propagation."""

import pytest

from concisetest.core.tree import TestTree
from concisetest.errors import RegistrationError


class TestTestTree:
    """Tests for TestTree."""

    def test_enter_group_pushes_and_pops(self):
        """Test that the group is on the stack only while its body runs."""
        tree = TestTree()
        seen = []

        tree.enter_group("outer", lambda: seen.append(tree.names()))

        assert seen == [["outer"]]
        assert tree.names() == []
        assert tree.depth == 0

    def test_nested_groups(self):
        """Test nested group names are reported outermost first."""
        tree = TestTree()
        seen = []

        def outer():
            tree.enter_group("inner", lambda: seen.append((tree.names(), tree.depth)))

        tree.enter_group("outer", outer)

        assert seen == [(["outer", "inner"], 2)]

    def test_stack_popped_when_body_raises(self):
        """Test that a raising body still pops its group."""
        tree = TestTree()

        def body():
            raise RuntimeError("broken group")

        with pytest.raises(RuntimeError, match="broken group"):
            tree.enter_group("outer", body)

        assert tree.names() == []

    def test_on_enter_receives_parent_depth(self):
        """Test the entry listener is called before the body at the parent's depth."""
        events = []
        tree = TestTree(on_enter=lambda name, depth: events.append((name, depth)))

        def outer():
            events.append("outer body")
            tree.enter_group("inner", lambda: events.append("inner body"))

        tree.enter_group("outer", outer)

        assert events == [("outer", 0), "outer body", ("inner", 1), "inner body"]

    def test_hooks_flattened_outer_first(self):
        """Test that hooks from outer groups come before inner ones."""
        tree = TestTree()

        def outer_before():
            pass

        def inner_before():
            pass

        def inner_after():
            pass

        def outer_after():
            pass

        collected = {}

        def inner():
            tree.add_before(inner_before)
            tree.add_after(inner_after)
            collected["befores"] = tree.befores()
            collected["afters"] = tree.afters()

        def outer():
            tree.add_before(outer_before)
            tree.add_after(outer_after)
            tree.enter_group("inner", inner)

        tree.enter_group("outer", outer)

        assert collected["befores"] == [outer_before, inner_before]
        assert collected["afters"] == [outer_after, inner_after]

    def test_hooks_scoped_to_their_group(self):
        """Test that an inner group's hooks are gone once it has finished."""
        tree = TestTree()
        after_inner = {}

        def outer():
            tree.enter_group("inner", lambda: tree.add_before(lambda: None))
            after_inner["befores"] = tree.befores()

        tree.enter_group("outer", outer)

        assert after_inner["befores"] == []

    def test_add_hook_outside_group(self):
        """Test that hooks cannot be registered without an active group."""
        tree = TestTree()

        with pytest.raises(RegistrationError):
            tree.add_before(lambda: None)
        with pytest.raises(RegistrationError):
            tree.add_after(lambda: None)
