"""
Logging Configuration Module
============================

Log setup for the awsinfo command.

Diagnostics (``INFO``, ``WARNING``, ``ERROR``) are written to stderr through
a Rich handler so that stdout carries only report text. An optional file
handler keeps a timestamped copy of the log.

Functions
---------
setup_logging
    Install the stderr and optional file handlers.
get_logger
    Return a module logger.

Example
-------
>>> from awsinfo.core.logging import setup_logging, get_logger
>>>
>>> setup_logging(level="INFO", log_file="awsinfo.log")
>>> logger = get_logger(__name__)
>>> logger.info("Listing instances")
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# Default format for log messages
DEFAULT_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("boto3", "botocore", "urllib3")


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Route diagnostics to stderr and, optionally, to a file.

    Parameters
    ----------
    level : str or int, default="INFO"
        Threshold for both handlers; unknown names fall back to INFO.
    log_file : str, optional
        Also append timestamped records to this path.
    rich_tracebacks : bool, default=True
        Render exception tracebacks with Rich.
    console : Console, optional
        Where the Rich handler writes. Defaults to a stderr console so
        stdout keeps only report text.

    Notes
    -----
    Root handlers are replaced on every call. boto3, botocore and urllib3
    are held at WARNING regardless of ``level``.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    rich_console = console or Console(stderr=True)
    console_handler = RichHandler(
        console=rich_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=False,
        markup=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"file={log_file or 'None'}"
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, normally a module's ``__name__``."""
    return logging.getLogger(name)
