"""App-wide exception handlers.

Domain failures never reach these: routes turn them into responses with
ErrorResponseBuilder. What arrives here is framework-raised (bearer 401s,
role 403s, unknown routes, body validation) or a bug.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from review_identity.core.container import get_logger
from review_identity.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (title, type slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _problem(
    request: Request,
    status_code: int,
    detail: str,
    *,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem(request, exc.status_code, detail, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """422 listing each offending body field."""
    assert isinstance(exc, RequestValidationError)
    errors = [
        ErrorDetail(
            field=".".join(str(p) for p in err.get("loc", ()) if p != "body") or "body",
            code=err.get("type", "validation_error"),
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]
    return _problem(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
