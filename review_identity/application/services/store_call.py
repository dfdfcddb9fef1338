"""Boundary between the services and their store adapters.

Adapters raise on infrastructure failure (driver errors, lost connections).
Services run every store call through `store_call`, which turns such an
exception into Failure(STORE_FAILURE) tagged with the operation name.
Cancellation is a BaseException and passes straight through.
"""

from collections.abc import Awaitable
from typing import TypeVar

from review_identity.core.errors import DependencyError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.errors import store_failure
from review_identity.domain.protocols import LoggerProtocol

T = TypeVar("T")


async def store_call(
    operation: str,
    awaitable: Awaitable[T],
    logger: LoggerProtocol,
) -> Result[T, DependencyError]:
    """Await a store operation, converting exceptions to a Failure.

    Args:
        operation: Name used in the error message and log event.
        awaitable: The pending repository call.
        logger: Where the failure is logged.

    Returns:
        Success(value) or Failure(STORE_FAILURE).

    Example:
        found = await store_call("find_user_by_email", repo.find_by_email(email), log)
        if isinstance(found, Failure):
            return found
        user = found.value
    """
    try:
        return Success(value=await awaitable)
    except Exception as e:
        # str(e) of a driver error can carry bound parameters, so only the type is logged
        logger.error(
            "store_operation_failed", operation=operation, error_type=type(e).__name__
        )
        return Failure(error=store_failure(operation, e))
