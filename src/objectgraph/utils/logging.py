"""Logging configuration using loguru.

Sets up the sinks used by objectgraph's own log calls (registry,
flush/reload and storage traffic) and routes standard library
logging, such as aiosqlite's, through the same sinks.
"""

import logging
import sys

from loguru import logger

from objectgraph.config.models import LoggingConfig


class _InterceptHandler(logging.Handler):
    """Route standard library logging through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging internals to report the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Replace loguru's sinks with the ones described by config.

    Console output goes to stderr. A file sink is added when
    config.file is set, rotated and retained as configured.

    Args:
        config: Level, format and file settings. Defaults to
            LoggingConfig() when omitted.
    """
    config = config or LoggingConfig()

    # Drop whatever sinks were installed before
    logger.remove()

    if config.format == "json":
        fmt = "{message}"
        serialize = True
    else:
        fmt = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        )
        serialize = False

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=config.format == "console",
    )

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression=config.compression,
        )

    # aiosqlite and other stdlib loggers end up in the same sinks
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging configured: level={} format={}", config.level, config.format)
