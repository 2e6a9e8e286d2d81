"""Logging utilities for Atlassian Connect JWT."""

import logging
import sys
import time
import types
import uuid
from typing import Any, TextIO

from .env import is_env_truthy

LOGGER_NAME = "atlassian-jwt"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def setup_logging(
    level: int = logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Configure the package logger.

    Calling it again replaces the handler installed by the previous call
    rather than adding a second one. ``ATLASSIAN_JWT_DEBUG`` forces DEBUG.

    Args:
        level: Logging level for the package logger
        stream: Output stream for the handler (defaults to stderr)

    Returns:
        The configured logger
    """
    if is_env_truthy("ATLASSIAN_JWT_DEBUG"):
        level = logging.DEBUG

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_atlassian_jwt_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    handler._atlassian_jwt_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret or token for logging.

    Args:
        value: The sensitive value
        keep_chars: Number of characters kept visible at each end

    Returns:
        The masked value, e.g. ``eyJh...Xk9c``
    """
    if not value:
        return "<empty>"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}...{value[-keep_chars:]}"


class LoggingContextManager:
    """Context manager that logs the outcome and duration of an operation."""

    def __init__(
        self, logger: logging.Logger, operation: str, **context: Any
    ) -> None:
        self.logger = logger
        self.operation = operation
        self.context = context
        self.trace_id = context.pop("trace_id", str(uuid.uuid4())[:8])
        self.start_time = 0.0

    def _context_str(self) -> str:
        items = {"trace_id": self.trace_id, **self.context}
        return ",".join(f"{k}={v}" for k, v in items.items())

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.perf_counter()
        self.logger.debug(
            f"Operation started: {self.operation} [{self._context_str()}]"
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.perf_counter() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s "
                f"[{self._context_str()}] - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s "
                f"[{self._context_str()}]"
            )


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger to write to
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
