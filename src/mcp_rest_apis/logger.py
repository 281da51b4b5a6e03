"""Logging utilities for the MCP REST APIs server."""

import logging
import sys

_LOGGER_NAME = "mcp_rest_apis"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the server.

    Args:
        name: Optional sub-logger name. If None, returns the root package logger.

    Returns:
        The requested logger.
    """
    if name:
        if name.startswith(f"{_LOGGER_NAME}."):
            return logging.getLogger(name)
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: int = logging.INFO, format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
) -> None:
    """Setup default logging configuration for the server process.

    Diagnostics go to stderr. Stdout is reserved for the stdio transport, so
    anything written there would corrupt the protocol stream.

    Args:
        level: Logging level.
        format_str: Log format string.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid adding multiple handlers if called multiple times
    if any(isinstance(h, logging.StreamHandler) and h.stream is sys.stderr for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
