"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns. Email
format and password policy are checked by the services, so request models
only require presence.

Endpoints:
    POST /api/v1/auth/send-code            - Mail a pre-registration code
    POST /api/v1/auth/register             - Register with a code
    POST /api/v1/auth/login                - Create a session
    POST /api/v1/auth/refresh              - Rotate the refresh token
    POST /api/v1/auth/logout               - Revoke the refresh token
    POST /api/v1/auth/send-verification    - Mail a verification link
    POST /api/v1/auth/verify-email         - Redeem a verification link
    GET  /api/v1/auth/verification-status  - Current user's verified flag
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_identity.application.dtos import AuthResult, UserView


# =============================================================================
# Registration
# =============================================================================


class SendCodeRequest(BaseModel):
    """Request schema for a pre-registration code.

    POST /api/v1/auth/send-code
    """

    email: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Email address to prove",
        examples=["reviewer@example.com"],
    )


class RegisterRequest(BaseModel):
    """Request schema for registration with a code.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    email: str = Field(..., min_length=1, max_length=255, description="Email address")
    code: str = Field(..., description="Code mailed by /send-code")
    password: str = Field(..., min_length=1, description="Password")
    display_name: str = Field(default="", description="Public name (optional)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "reviewer@example.com",
                "code": "042917",
                "password": "SecurePass123!",
                "display_name": "Reviewer",
            }
        }
    )


# =============================================================================
# Sessions
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class RefreshRequest(BaseModel):
    """Request schema for token rotation."""

    refresh_token: str = Field(..., description="Opaque refresh token")


class LogoutRequest(BaseModel):
    """Request schema for logout."""

    refresh_token: str = Field(..., description="Opaque refresh token to revoke")


class UserResponse(BaseModel):
    """Sanitized user."""

    id: UUID
    email: str
    display_name: str
    role: str
    email_verified: bool
    email_verified_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            email=view.email,
            display_name=view.display_name,
            role=view.role.value,
            email_verified=view.email_verified,
            email_verified_at=view.email_verified_at,
            created_at=view.created_at,
        )


class AuthResponse(BaseModel):
    """Token pair plus the user it was issued to."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token (single use)")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )
    expires_in: int = Field(..., description="Access token expiration in seconds")
    user: UserResponse

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            user=UserResponse.from_view(result.user),
        )


# =============================================================================
# Email verification
# =============================================================================


class VerifyEmailRequest(BaseModel):
    """Request schema for redeeming a verification link."""

    token: str = Field(..., description="Token from the verification link")


class VerificationStatusResponse(BaseModel):
    """Current user's verification flag."""

    email_verified: bool


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
