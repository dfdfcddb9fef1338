"""structlog-backed LoggerProtocol adapter.

Renders to stdout: colored key/value lines in development, one JSON object
per line everywhere else. Context keys that name a secret (passwords,
tokens, codes) are masked before rendering, whatever the caller passed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

REDACTED = "***"

_SECRET_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "code",
        "token",
        "secret",
        "access_token",
        "refresh_token",
        "link",
    }
)


def redact_secrets(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask values whose key names a secret."""
    for key in _SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _exception_fields(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Logger writing structured events to stdout.

    Args:
        use_json: Emit JSON lines instead of the development renderer.
        level: Minimum level name; unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                redact_secrets,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger().bind(service="review-identity")

    @classmethod
    def _wrapping(cls, bound: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.error(message, **_exception_fields(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_exception_fields(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Child adapter carrying `context` on every event; self is unchanged."""
        return ConsoleAdapter._wrapping(self._logger.bind(**context))
