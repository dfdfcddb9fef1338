"""Backing store and mail transport failures.

Unlike the catalogues, these carry the failing operation and its cause, so
they are built per failure rather than shared.
"""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import DependencyError


def store_failure(operation: str, cause: Exception) -> DependencyError:
    """Wrap a store exception with the operation that raised it.

    Args:
        operation: Short operation name (e.g. "find_user_by_email").
        cause: The exception raised by the store adapter.

    Returns:
        DependencyError with code STORE_FAILURE.
    """
    return DependencyError(
        code=ErrorCode.STORE_FAILURE,
        message=f"{operation} failed ({type(cause).__name__})",
        dependency="store",
        details={"operation": operation, "cause": type(cause).__name__},
    )


def send_failure(reason: str) -> DependencyError:
    """Mail transport rejected, failed or timed out."""
    return DependencyError(
        code=ErrorCode.EMAIL_SEND_FAILED,
        message=f"Failed to send email: {reason}",
        dependency="email",
    )
