"""Core shared kernel.

Foundational pieces used by every layer:
- Result types for railway-oriented error handling
- Error base classes and the closed ErrorCode catalogue
- Settings (pydantic-settings)

The core module has NO dependencies on other application layers.
"""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from review_identity.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DependencyError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
