"""Configuration management for concise-test."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


CONFIG_NAMES = ["concise.json", ".concise.json"]


class TestConfig(BaseModel):
    """Test discovery configuration."""

    test_directory: str = Field(default="test", description="Directory scanned in discovery mode")
    pattern: str = Field(default="*.tests.py", description="Glob matched against test file names")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Test file pattern cannot be empty")
        return v


class OutputConfig(BaseModel):
    """Console output configuration."""

    color: bool = Field(default=True, description="Colorize console output")
    indent_width: int = Field(default=2, description="Spaces of indentation per nesting level")
    separator: str = Field(default=" → ", description="Separator between breadcrumb path segments")
    show_traces: bool = Field(default=True, description="Print stack traces in the failures section")

    @field_validator("indent_width")
    @classmethod
    def validate_indent_width(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Indent width cannot be negative")
        return v


class ConciseConfig(BaseModel):
    """Main configuration for concise-test."""

    test: TestConfig = Field(default_factory=TestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "ConciseConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def find_and_load(cls, start_dir: Path | str | None = None) -> "ConciseConfig":
        """Find and load a configuration file, searching up the directory tree.

        Returns the default configuration when no file is found.
        """
        if start_dir is None:
            start_dir = Path.cwd()
        else:
            start_dir = Path(start_dir)

        current = start_dir.resolve()
        for directory in [current, *current.parents]:
            for name in CONFIG_NAMES:
                config_path = directory / name
                if config_path.exists():
                    return cls.from_file(config_path)

        return cls()

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, ensure_ascii=False)
