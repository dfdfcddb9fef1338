"""SMTP email service (adapter).

Implements EmailSenderProtocol with the standard library smtplib client.
The blocking SMTP exchange runs in a worker thread and is bounded twice:
by the socket timeout and by an asyncio deadline around the whole send.
"""

import asyncio
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from review_identity.core.errors import DependencyError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.errors import send_failure
from review_identity.domain.protocols import LoggerProtocol


class SMTPEmailService:
    """Mail transport over SMTP with STARTTLS and login.

    Configured iff host, username and password are all non-empty.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str,
        logger: LoggerProtocol,
        use_tls: bool = True,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._from_email = from_email
        self._from_name = from_name
        self._use_tls = use_tls
        self._timeout = timeout_seconds
        self._logger = logger

    def is_configured(self) -> bool:
        return bool(self._host and self._username and self._password)

    async def send(
        self,
        to: str,
        subject: str,
        html_body: str,
    ) -> Result[None, DependencyError]:
        """Send one HTML message.

        Returns:
            Success(None), or Failure(EMAIL_SEND_FAILED) on SMTP/socket error
            or when the deadline passes.
        """
        message = self._build_message(to, subject, html_body)
        try:
            async with asyncio.timeout(self._timeout):
                await asyncio.to_thread(self._deliver, message)
        except TimeoutError:
            self._logger.warning(
                "smtp_send_timeout", recipient=to, timeout_seconds=self._timeout
            )
            return Failure(error=send_failure("timed out"))
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error("smtp_send_failed", error=e, recipient=to)
            return Failure(error=send_failure(str(e) or type(e).__name__))
        return Success(value=None)

    def _build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self._from_name, self._from_email))
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_body, subtype="html", charset="utf-8")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            if self._use_tls:
                server.starttls()
            server.login(self._username, self._password)
            server.send_message(message)
