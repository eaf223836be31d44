"""Nested group stack and hook propagation."""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from concisetest.core.models import Describe, Hook
from concisetest.errors import RegistrationError


GroupListener = Callable[[str, int], None]


class TestTree:
    """Tracks the chain of groups that are currently running.

    Only the active ancestor chain exists at any time: a group is pushed when
    its body starts and popped when the body returns or raises.
    """

    def __init__(self, on_enter: Optional[GroupListener] = None):
        """Initialize an empty stack.

        Args:
            on_enter: Called with the group name and the nesting depth of its
                parent, before the group's body runs
        """
        self._stack: list[Describe] = []
        self._on_enter = on_enter

    @property
    def depth(self) -> int:
        """Get the current nesting depth."""
        return len(self._stack)

    def names(self) -> list[str]:
        """Get a snapshot of the active group names, outermost first."""
        return [describe.name for describe in self._stack]

    def current(self) -> Describe:
        """Get the innermost active group."""
        if not self._stack:
            raise RegistrationError("Hooks can only be registered inside describe()")
        return self._stack[-1]

    @contextmanager
    def _entered(self, name: str) -> Iterator[Describe]:
        describe = Describe(name)
        self._stack.append(describe)
        try:
            yield describe
        finally:
            # Pop even when the body raises so later files start from a clean stack.
            self._stack.pop()

    def enter_group(self, name: str, body: Callable[[], object]) -> None:
        """Run a group body with a new group pushed on the stack.

        Exceptions raised by ``body`` propagate to the caller.
        """
        if self._on_enter:
            self._on_enter(name, self.depth)

        with self._entered(name):
            body()

    def add_before(self, hook: Hook) -> Hook:
        """Register a hook to run before every test in the current group."""
        self.current().befores.append(hook)
        return hook

    def add_after(self, hook: Hook) -> Hook:
        """Register a hook to run after every test in the current group."""
        self.current().afters.append(hook)
        return hook

    def befores(self) -> list[Hook]:
        """Get all before hooks on the stack, outer groups first."""
        return [hook for describe in self._stack for hook in describe.befores]

    def afters(self) -> list[Hook]:
        """Get all after hooks on the stack, outer groups first."""
        return [hook for describe in self._stack for hook in describe.afters]
