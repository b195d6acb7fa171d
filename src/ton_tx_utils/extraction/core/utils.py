"""
Shared helpers for extraction tooling.
"""

import logging

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_format: str | None = None) -> None:
    """
    Configure logging for the command-line tools.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string. Uses default if None.
    """
    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from pytoniq and asyncio loggers
    logging.getLogger("pytoniq").setLevel(logging.WARNING)
    logging.getLogger("pytoniq_core").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
