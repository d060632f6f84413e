"""
Logger configuration for the Lambda entry points.

One stdout handler with a timestamped format. CloudWatch captures stdout, so
the same setup serves Lambda and local runs.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# SDK and PDF parser loggers that flood DEBUG/INFO output
NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore", "google", "pypdf")


def configure_logging(level: str = "INFO") -> None:
    """
    Route all logging to stdout at the given level.

    Safe to call on every cold start: handlers installed earlier (including
    the Lambda runtime's own) are replaced, not duplicated.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(stream_handler)
    root_logger.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
