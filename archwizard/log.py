"""Logging setup."""

from loguru import logger


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """Route loguru to *log_file* only.

    The wizard owns the whole screen while it runs, so nothing is ever
    logged to stderr.
    """
    logger.remove()
    if log_file:
        logger.add(
            log_file,
            level="DEBUG" if verbose else "INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}",
        )
