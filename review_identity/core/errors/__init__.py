"""Core errors package.

Usage:
    from review_identity.core.errors import DomainError, ValidationError
"""

from review_identity.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)
from review_identity.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "DependencyError",
]
