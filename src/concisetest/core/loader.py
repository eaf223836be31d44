"""Loads test files so their registrations run."""

import importlib.util
import re
import sys
from pathlib import Path
from typing import Optional

from concisetest.core.context import RunContext, activate


def module_name_for(path: Path) -> str:
    """Build an importable module name for a test file such as ``math.tests.py``."""
    stem = path.name.removesuffix(".py")
    return "concisetest_suite_" + re.sub(r"\W", "_", stem)


def import_roots(path: Path, base_dir: Optional[Path] = None) -> list[str]:
    """Get the directories a test file imports from: its own, then the project root."""
    roots = [str(path.parent)]
    if base_dir is not None and str(base_dir) not in roots:
        roots.append(str(base_dir))
    return roots


def load_test_file(path: Path, context: RunContext, base_dir: Optional[Path] = None) -> None:
    """Execute a test file with ``context`` receiving its registrations.

    While the file runs, its directory and ``base_dir`` are on ``sys.path`` so
    it can import helpers next to it and the project code under test. The
    module is only kept in ``sys.modules`` while it runs, so loading the same
    file in a later run executes it again.
    """
    name = module_name_for(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load test file: {path}")

    module = importlib.util.module_from_spec(spec)
    added = [root for root in import_roots(path, base_dir) if root not in sys.path]
    sys.path[:0] = added
    sys.modules[name] = module
    try:
        with activate(context):
            spec.loader.exec_module(module)
    finally:
        sys.modules.pop(name, None)
        for root in added:
            sys.path.remove(root)
