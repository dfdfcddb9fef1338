"""Stub email service (development/testing).

Records every message in memory and logs the recipient and subject instead
of delivering anything. Message bodies are kept in memory only, never
logged, since they carry codes and links.
"""

from dataclasses import dataclass

from review_identity.core.errors import DependencyError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.errors import send_failure
from review_identity.domain.protocols import LoggerProtocol


@dataclass(frozen=True)
class SentEmail:
    """A message captured by the stub."""

    to: str
    subject: str
    html_body: str


class StubEmailService:
    """In-memory mail transport.

    Args:
        logger: Structured logger.
        configured: What is_configured() reports.
        fail_with: If set, every send fails with this reason.

    Example:
        >>> stub = StubEmailService(logger=logger)
        >>> await stub.send("a@example.com", "Hi", "<p>Hi</p>")
        >>> stub.outbox[-1].to
        'a@example.com'
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        configured: bool = True,
        fail_with: str | None = None,
    ) -> None:
        self._logger = logger
        self._configured = configured
        self._fail_with = fail_with
        self.outbox: list[SentEmail] = []

    def is_configured(self) -> bool:
        return self._configured

    async def send(
        self,
        to: str,
        subject: str,
        html_body: str,
    ) -> Result[None, DependencyError]:
        if self._fail_with is not None:
            return Failure(error=send_failure(self._fail_with))
        self.outbox.append(SentEmail(to=to, subject=subject, html_body=html_body))
        self._logger.info("stub_email_sent", recipient=to, subject=subject)
        return Success(value=None)

    def messages_to(self, recipient: str) -> list[SentEmail]:
        """Messages sent to one recipient, oldest first."""
        return [m for m in self.outbox if m.to == recipient]
