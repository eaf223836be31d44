"""Core test execution functionality."""

from concisetest.core.context import RunContext
from concisetest.core.discovery import TestDiscovery
from concisetest.core.runner import TestRunner

__all__ = ["RunContext", "TestRunner", "TestDiscovery"]
