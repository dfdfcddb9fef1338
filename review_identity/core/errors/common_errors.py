"""Error categories shared by all components.

Each class is one category of the error taxonomy; the ErrorCode on the
instance says which specific failure occurred.

Error Types:
- ValidationError: Missing or malformed input (caller's fault)
- ConflictError: State already satisfies a precondition
- AuthenticationError: Credential or token rejected
- NotFoundError: Referenced resource does not exist
- AuthorizationError: Authenticated but not permitted
- DependencyError: Mail transport or store failure

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_CREDENTIALS_FORMAT,
        message="Password must be at least 8 characters",
        field="password",
    ))
"""

from dataclasses import dataclass

from review_identity.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, VerificationRecord, ...).
        resource_id: Identifier that did not resolve.
    """

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state already satisfied).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict (email, ...).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (bad credentials, invalid or expired token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        required_permission: Role or permission that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DependencyError(DomainError):
    """Failure of an external collaborator (mail transport, backing store).

    Not retried by the identity core; retries belong to the caller.

    Attributes:
        dependency: Collaborator that failed ("email", "store").
    """

    dependency: str
