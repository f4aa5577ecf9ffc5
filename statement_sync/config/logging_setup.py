"""Console logging setup for command-line runs."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"


def config_configure_logging(level: str = "INFO") -> None:
    """Route all log records through a rich handler writing to stderr.

    Args:
        level: Root logging level name.

    Returns:
        None: Logging is configured as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
