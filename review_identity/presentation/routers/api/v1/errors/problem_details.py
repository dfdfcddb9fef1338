"""Error response bodies (RFC 7807 Problem Details).

Every non-2xx response of the API uses ProblemDetails. `code` carries the
ErrorCode value clients should branch on; `errors` lists field problems for
400 and 422 responses.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One field that failed validation or policy."""

    field: str = Field(..., examples=["password"])
    code: str = Field(..., examples=["invalid_credentials_format"])
    message: str = Field(..., examples=["Password must be at least 8 characters"])


class ProblemDetails(BaseModel):
    """RFC 7807 body.

    Example:
        {
            "type": "/errors/token_expired",
            "title": "Authentication Required",
            "status": 401,
            "detail": "Verification code or token has expired",
            "instance": "/api/v1/auth/verify-email",
            "code": "token_expired"
        }
    """

    type: str = Field(..., examples=["/errors/invalid_credentials"])
    title: str
    status: int = Field(..., examples=[401])
    detail: str
    instance: str = Field(..., examples=["/api/v1/auth/login"])
    code: str | None = None
    errors: list[ErrorDetail] | None = None
