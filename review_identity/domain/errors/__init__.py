"""Domain error catalogues.

Error values (never raised) returned inside Failure(error=...).

Usage:
    from review_identity.domain.errors import AuthErrors, VerificationErrors
"""

from review_identity.domain.errors.auth_errors import AuthErrors
from review_identity.domain.errors.secret_errors import SecretErrors
from review_identity.domain.errors.store_errors import send_failure, store_failure
from review_identity.domain.errors.token_errors import TokenErrors
from review_identity.domain.errors.verification_errors import VerificationErrors

__all__ = [
    "AuthErrors",
    "SecretErrors",
    "TokenErrors",
    "VerificationErrors",
    "send_failure",
    "store_failure",
]
