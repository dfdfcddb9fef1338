"""EmailSenderProtocol - port for outbound mail.

The identity core only needs a single capability: send an HTML message.
Configuration must be checked with is_configured() before sending; an
unconfigured transport is reported, never attempted.
"""

from typing import Protocol

from review_identity.core.errors import DependencyError
from review_identity.core.result import Result


class EmailSenderProtocol(Protocol):
    """Mail transport protocol (port).

    Implementations:
        - SMTPEmailService: smtplib over STARTTLS, bounded by a timeout
        - StubEmailService: records messages in memory (development, tests)
    """

    def is_configured(self) -> bool:
        """True when the transport has everything it needs to send."""
        ...

    async def send(
        self,
        to: str,
        subject: str,
        html_body: str,
    ) -> Result[None, DependencyError]:
        """Send one message.

        Args:
            to: Recipient address.
            subject: Subject line.
            html_body: HTML body.

        Returns:
            Success(None), or Failure(EMAIL_SEND_FAILED) on transport error
            or timeout.
        """
        ...
