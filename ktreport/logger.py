"""
Logging utility for ktreport.

The report itself is written to standard output, so log records go to a
separate standard-error console.
"""
import logging
from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

ROOT_LOGGER_NAME = "ktreport"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name of the logger

    Returns:
        A logger under the ktreport namespace
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a rich handler to the ktreport root logger.

    Calling this more than once only adjusts the level.

    Args:
        verbose: Log debug records when True, warnings and above otherwise

    Returns:
        The configured root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
