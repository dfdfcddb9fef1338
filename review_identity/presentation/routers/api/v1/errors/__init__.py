"""RFC 7807 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
    ErrorResponseBuilder: Domain error -> RFC 7807 response
    register_exception_handlers: Register global exception handlers
"""

from review_identity.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from review_identity.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from review_identity.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
