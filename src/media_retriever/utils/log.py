"""Logging setup."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "media_retriever"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Route the package logger through rich.

    Calling it again replaces the previous handler instead of stacking another.

    Args:
        level: Log level name or number
        verbose: Force DEBUG and show file paths
        console: Console to write to, stderr if omitted

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)

    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else level)
    package_logger.propagate = False
    return package_logger
