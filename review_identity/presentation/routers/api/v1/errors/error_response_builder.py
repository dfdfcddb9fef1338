"""Error response builder for RFC 7807 Problem Details.

Converts domain error values returned by the services into JSON
responses. The HTTP status follows the error category, with two
dependency codes mapped individually:

    ValidationError      -> 400
    AuthenticationError  -> 401
    AuthorizationError   -> 403
    NotFoundError        -> 404
    ConflictError        -> 409
    EMAIL_SERVICE_NOT_CONFIGURED -> 503
    EMAIL_SEND_FAILED    -> 502
    other DependencyError -> 500

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from review_identity.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_CATEGORY_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)

_CODE_STATUS: dict[ErrorCode, int] = {
    ErrorCode.EMAIL_SERVICE_NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.EMAIL_SEND_FAILED: status.HTTP_502_BAD_GATEWAY,
}

_STATUS_TITLE: dict[int, str] = {
    400: "Validation Failed",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    409: "Resource Conflict",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses from domain errors."""

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Store failures keep their cause out of the response body.

        Args:
            error: Error value from a Failure.
            request: FastAPI Request object (for instance URL).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        detail = error.message
        if error.code == ErrorCode.STORE_FAILURE:
            detail = "An unexpected error occurred"

        problem = ProblemDetails(
            type=f"/errors/{error.code.value}",
            title=_STATUS_TITLE.get(status_code, "Error"),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            code=error.code.value,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a domain error to its HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(AuthErrors.INVALID_CREDENTIALS)
            401
        """
        if error.code in _CODE_STATUS:
            return _CODE_STATUS[error.code]
        for category, status_code in _CATEGORY_STATUS:
            if isinstance(error, category):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR
