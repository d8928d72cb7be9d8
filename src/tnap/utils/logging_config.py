"""
Centralized logging configuration.

The slideshow owns the whole screen, so log records go to a file instead of
the terminal, and verbose third-party loggers are silenced.
"""

import logging
import warnings
from pathlib import Path
from typing import Optional


NOISY_LIBRARIES = [
    "openai",
    "openai._base_client",
    "httpx",
    "httpcore",
    "urllib3",
    "PIL",
    "term_image",
]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger and suppress noisy third-party output.

    Args:
        verbose: Log at DEBUG level instead of WARNING
        log_file: Write records here; without it records go to stderr
    """
    warnings.filterwarnings("ignore")

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
        existing.close()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
