"""HTTP request/response schemas (Pydantic)."""

from review_identity.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    SendCodeRequest,
    UserResponse,
    VerificationStatusResponse,
    VerifyEmailRequest,
)

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LogoutRequest",
    "MessageResponse",
    "RefreshRequest",
    "RegisterRequest",
    "SendCodeRequest",
    "UserResponse",
    "VerificationStatusResponse",
    "VerifyEmailRequest",
]
