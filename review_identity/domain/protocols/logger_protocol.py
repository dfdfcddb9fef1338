"""Structured logging port.

Events are snake_case names with keyword context:

    logger.info("refresh_token_rotated", user_id=str(user.id))

Never pass passwords, tokens, codes or verification links as context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """What services need from a logger."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure; `error`, when given, adds its type and text."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Logger that adds `context` to every event."""
        ...
