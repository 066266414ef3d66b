"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe (no secrets).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded service, rejected requests
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure, immediate attention

Security:
    - NEVER log passwords, tokens, session identifiers
    - Log user ids and error codes instead

Usage:
    logger.info("sign_in_succeeded", user_id=str(user.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("forbidden", user_id=str(user.id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self,
        message: str,
        /,
        *,
        error: BaseException | None = None,
        **context: Any,
    ) -> None:
        """Log an error-level message.

        Args:
            message: Human-readable message.
            error: Optional exception; implementations include its type and
                message (and stack when appropriate).
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self,
        message: str,
        /,
        *,
        error: BaseException | None = None,
        **context: Any,
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context permanently bound."""
        ...
