"""Centralized logging configuration for codefig."""

import logging
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure the ``codefig`` logger.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to a log file, written in addition to stderr
        format_string: Optional custom format string

    Returns:
        The configured ``codefig`` logger
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger("codefig")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
