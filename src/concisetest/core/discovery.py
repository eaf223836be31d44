"""Test file discovery."""

import os
from pathlib import Path
from typing import Optional

from concisetest.config import ConciseConfig
from concisetest.errors import CannotAccessFileError


class TestDiscovery:
    """Resolves the set of test files for a run."""

    def __init__(self, config: ConciseConfig, base_dir: Path):
        """Initialize test discovery."""
        self.config = config
        self.base_dir = base_dir
        self.test_dir = base_dir / config.test.test_directory

    def choose_test_files(self, file_path: Optional[str] = None) -> list[Path]:
        """Get the single file given on the command line, or discover them all."""
        if file_path:
            return [self.single_file(file_path)]
        return self.discover()

    def single_file(self, file_path: str) -> Path:
        """Resolve a test file path against the base directory.

        Raises:
            CannotAccessFileError: If the file does not exist or is unreadable
        """
        full_path = (self.base_dir / file_path).resolve()
        if not full_path.is_file() or not os.access(full_path, os.R_OK):
            raise CannotAccessFileError(file_path)
        return full_path

    def discover(self) -> list[Path]:
        """Find the files in the test directory whose names match the pattern.

        Only the top level of the directory is scanned.

        Raises:
            FileNotFoundError: If the test directory does not exist
        """
        if not self.test_dir.is_dir():
            raise FileNotFoundError(f"Test directory not found: {self.test_dir}")

        return sorted(
            test_file.resolve()
            for test_file in self.test_dir.glob(self.config.test.pattern)
            if test_file.is_file()
        )
