"""Centralized logging setup for design_patterns with package filtering."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_NAME = "design_patterns"


class PackageFilter(logging.Filter):
    """Filter to only allow logs from specified packages.

    Keeps third-party library chatter out of the sample output.
    """

    def __init__(self, packages: List[str]) -> None:
        super().__init__()
        self.packages = packages

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log records to only allow specified packages.

        Args:
            record: LogRecord to filter

        Returns:
            True if record should be logged, False otherwise
        """
        return any(
            record.name == pkg or record.name.startswith(f"{pkg}.") for pkg in self.packages
        )


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Configure root logging with a RichHandler.

    Args:
        verbose: Enable debug level logging
        console: Console the handler writes to; defaults to stderr
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        log_time_format="%H:%M:%S",
    )
    handler.setLevel(log_level)
    handler.addFilter(PackageFilter([PACKAGE_NAME]))

    logging.basicConfig(
        level=log_level,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
