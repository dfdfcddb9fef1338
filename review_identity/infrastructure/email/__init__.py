"""Email service implementations.

- SMTPEmailService: SMTP delivery (production)
- StubEmailService: in-memory capture for development/testing
"""

from review_identity.infrastructure.email.smtp_email_service import SMTPEmailService
from review_identity.infrastructure.email.stub_email_service import (
    SentEmail,
    StubEmailService,
)

__all__ = [
    "SMTPEmailService",
    "SentEmail",
    "StubEmailService",
]
