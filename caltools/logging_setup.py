"""
Logging configuration for the command line.

The library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def create_rich_handler() -> logging.Handler:
    """Create a Rich handler writing to stderr."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def configure_logging(level: str = "WARNING") -> None:
    """Route the ``caltools`` loggers through a single Rich handler."""
    package_logger = logging.getLogger("caltools")
    package_logger.setLevel(level.upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    package_logger.addHandler(create_rich_handler())
