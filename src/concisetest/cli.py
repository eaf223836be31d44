"""Command-line interface for concise-test."""

import sys
from pathlib import Path
from typing import Optional

import click

from concisetest import __version__
from concisetest.config import ConciseConfig
from concisetest.core.models import ExitCode
from concisetest.core.runner import TestRunner
from concisetest.report.reporter import Reporter


@click.command()
@click.version_option(version=__version__, prog_name="concise")
@click.argument("path", required=False)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    help="Path to configuration file (default: concise.json, searched upwards)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
def main(path: Optional[str], config_path: Optional[str], no_color: bool) -> None:
    """Run test files.

    With PATH, run that single file. Without it, run every file in the test
    directory that matches the configured pattern.

    Exit codes: 0 all tests passed, 1 some tests failed, 2 PATH could not
    be accessed, 3 the configuration file is missing or invalid.
    """
    base_dir = Path.cwd()

    try:
        if config_path:
            config = ConciseConfig.from_file(config_path)
        else:
            config = ConciseConfig.find_and_load(base_dir)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(int(ExitCode.CONFIG_ERROR))

    if no_color:
        config.output.color = False

    runner = TestRunner(config, base_dir, reporter=Reporter(config.output))
    sys.exit(int(runner.run(path)))


if __name__ == "__main__":
    main()
