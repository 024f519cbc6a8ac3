"""Log configuration shared by the adapter and its command-line tool."""

import logging
import sys
from typing import Any

PACKAGE_LOGGER = "web3_providers_eip1193"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Route adapter log records to a stream at the given level.

    The root logger is reconfigured so records from wrapped clients show up
    alongside the adapter's own, and the package logger is pinned to the same
    level.

    Args:
        level: Level name, case-insensitive (e.g., "debug", "WARNING")
        format_string: Record format, defaults to DEFAULT_FORMAT
        stream: Destination stream, defaults to stderr

    Returns:
        The package logger
    """
    numeric_level = getattr(logging, level.upper())

    # The CLI prints RPC responses on stdout
    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    return package_logger
