"""
concise-test - a minimal test-execution engine.

Test files register nested groups and tests with before/after-each hooks;
each test runs as soon as it is registered, assertion failures are
collected per test, and the run ends with a failure digest, a tally and
a CI-friendly exit code.
"""

__version__ = "0.1.0"

from concisetest.api import after_each, before_each, describe, expect, it
from concisetest.errors import ExpectationError
from concisetest.matchers import MatcherKind

__all__ = [
    "describe",
    "it",
    "before_each",
    "after_each",
    "expect",
    "ExpectationError",
    "MatcherKind",
]
