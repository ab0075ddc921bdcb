"""CLI commands for running the pattern samples from the command line."""

from __future__ import annotations

import logging
from typing import Optional

import click
import pydantic as pd
from rich.console import Console

from design_patterns.config import load_config
from design_patterns.logging_utils import setup_logging
from design_patterns.samples.registry import SampleRegistry

logger = logging.getLogger(__name__)


@click.group()
def main() -> None:
    """Run classic design pattern samples."""


@main.command(name="list")
def list_samples() -> None:
    """List the available samples."""
    console = Console(highlight=False)
    for sample in SampleRegistry.get_all_samples():
        console.print(f"[cyan]{sample.name}[/cyan]  {sample.description}")


@main.command()
@click.argument("sample", required=False)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging to see state transitions and cursor resets",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable colored output",
)
def run(sample: Optional[str], verbose: bool, no_color: bool) -> None:
    """Run exactly one sample.

    SAMPLE defaults to the configured default sample (DESIGN_PATTERNS_DEFAULT_SAMPLE
    or [tool.design_patterns] default-sample in pyproject.toml).
    """
    try:
        config = load_config()
    except pd.ValidationError as e:
        raise click.ClickException(f"Invalid [tool.design_patterns] configuration: {e}")
    verbose = verbose or config.verbose
    color = config.color and not no_color
    name = sample or config.default_sample

    setup_logging(verbose)
    console = Console(no_color=not color, highlight=False)

    try:
        selected = SampleRegistry.get_sample(name)
    except KeyError:
        names = ", ".join(SampleRegistry.get_all_names())
        raise click.ClickException(f"Unknown sample '{name}'. Available samples: {names}")

    logger.debug(f"Running sample '{selected.name}'")
    try:
        selected.run(console)
    except KeyboardInterrupt:
        console.print("\n[yellow]Sample interrupted[/yellow]")
    except Exception as e:
        console.print(f"[red]EXCEPTION: {e}[/red]")
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
