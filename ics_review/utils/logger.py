"""
Logging setup for the ICS review tools.

Provides:
- Timestamps with milliseconds and aligned log levels
- Console output on stdout, or any stream the entry point passes in
- Optional file output (everything at DEBUG)

Library modules only call ``logging.getLogger(__name__)``; entry points
call ``configure_logging`` once at startup.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from ics_review.config import get_log_dir

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S,%f"


class MillisecondsFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds and aligns log levels."""

    def formatTime(self, record, datefmt=None):  # noqa: N802 - must match parent class method name
        """Override formatTime to include milliseconds."""
        ct = datetime.fromtimestamp(record.created)
        if datefmt and "%f" in datefmt:
            s = ct.strftime(datefmt.replace(",%f", ""))
            return s + f",{int(record.msecs):03d}"
        elif datefmt:
            return ct.strftime(datefmt)
        else:
            return ct.strftime("%Y-%m-%d %H:%M:%S") + f",{int(record.msecs):03d}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the root logger with a unified format.

    Args:
        log_level: Logging level for the console (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file name; the file always receives DEBUG
        log_dir: Directory for log files (defaults to ICS_REVIEW_LOG_DIR or ./logs)
        stream: Console stream (defaults to stdout)

    Returns:
        The configured root logger
    """
    level = getattr(logging, log_level.upper())
    formatter = MillisecondsFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = log_dir or get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Log everything to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
        root_logger.info(f"Logging to file: {log_path}")
    else:
        root_logger.setLevel(level)

    return root_logger
