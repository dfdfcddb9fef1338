"""Success/Failure result values.

Services never raise for expected outcomes. They return Success(value=...)
or Failure(error=...), and callers branch with isinstance or match:

    match await auth_service.login(email, password):
        case Success(value=auth):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; `value` is None for operations with no output."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation refused or failed; `error` says why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
