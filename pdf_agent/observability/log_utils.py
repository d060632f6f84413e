"""
Structured logging helpers.

Keeps `extra=` context small: payloads, vectors and long chunk text are
summarized instead of dumped into log lines.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions
"""

import logging
from typing import Any

from pydantic import BaseModel

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for log context.

    Bytes and sequences are reduced to their size, models to their class
    name, and long strings are truncated.
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    if isinstance(value, BaseModel):
        return type(value).__name__

    text = value if isinstance(value, str) else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with every context value passed through safe_log_value.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Key-value pairs attached as `extra`; keys must not clash
            with LogRecord attributes such as "filename" or "message"
    """
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})
