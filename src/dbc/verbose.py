"""Logging configuration for contract violation records."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    level: str = "WARNING",
    logger_name: str = "dbc",
) -> logging.Logger:
    """
    Configure and return the logger that receives violation records.

    Must be called before the first check if the records should go anywhere
    other than the root logger's handlers. Calling it again replaces the
    handlers installed by the previous call.

    Args:
        debug_file: If given, records are appended to this file.
        verbose: If True, also log to stderr.
        level: Minimum level name, e.g. "WARNING".
        logger_name: Name of the logger to configure.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.disabled = False
    logger.setLevel(level.upper())

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
