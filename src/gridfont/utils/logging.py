"""Logging utilities for Gridfont."""

import logging
from pathlib import Path

import structlog

from gridfont.config import LoggingConfig


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Output goes through stdlib logging even before configure_logging is
    called, so the package's NullHandler keeps the library silent until the
    application sets up handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for the library.

    Args:
        log_file: Path to log file (file output disabled if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    logger_root = logging.getLogger("gridfont")
    logger_root.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call; the NullHandler stays.
    for handler in list(logger_root.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger_root.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        logger_root.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger_root.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("gridfont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


def configure_logging_from_settings(config: LoggingConfig) -> structlog.stdlib.BoundLogger:
    """Configure logging from a LoggingConfig model."""
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
    )
