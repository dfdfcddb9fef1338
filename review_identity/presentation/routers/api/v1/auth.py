"""Auth router.

Thin handlers: bind the request body, call one service operation, and turn
a Failure into an RFC 7807 response via ErrorResponseBuilder.

Endpoints:
    POST /auth/send-code            - 202, code mailed
    POST /auth/register             - 201, AuthResponse
    POST /auth/login                - 200, AuthResponse
    POST /auth/refresh              - 200, AuthResponse
    POST /auth/logout               - 204
    POST /auth/send-verification    - 202, link mailed (bearer)
    POST /auth/verify-email         - 200
    GET  /auth/verification-status  - 200 (bearer)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from review_identity.application.services import (
    AuthService,
    EmailVerificationService,
    RegistrationService,
)
from review_identity.core.container import (
    get_auth_service,
    get_email_verification_service,
    get_registration_service,
)
from review_identity.core.result import Failure
from review_identity.domain.entities.user import User
from review_identity.presentation.routers.api.middleware import get_current_user
from review_identity.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from review_identity.schemas import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    SendCodeRequest,
    VerificationStatusResponse,
    VerifyEmailRequest,
)

router = APIRouter(prefix="/auth", tags=["Auth"])

CurrentUser = Annotated[User, Depends(get_current_user)]

_ERRORS = {
    400: {"model": ProblemDetails},
    401: {"model": ProblemDetails},
    409: {"model": ProblemDetails},
}


@router.post(
    "/send-code",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    responses={**_ERRORS, 502: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Send registration code",
)
async def send_code(
    request: Request,
    data: SendCodeRequest,
    service: Annotated[EmailVerificationService, Depends(get_email_verification_service)],
) -> MessageResponse | JSONResponse:
    """Mail a one-time numeric code to an address that has no account yet.

    The code itself is never part of the response.
    """
    result = await service.send_registration_code(data.email)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MessageResponse(message="Verification code sent")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses=_ERRORS,
    summary="Register with a code",
)
async def register(
    request: Request,
    data: RegisterRequest,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
) -> AuthResponse | JSONResponse:
    result = await service.register_with_code(
        data.email, data.code, data.password, data.display_name
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthResponse.from_result(result.value)


@router.post("/login", response_model=AuthResponse, responses=_ERRORS, summary="Login")
async def login(
    request: Request,
    data: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse | JSONResponse:
    result = await service.login(data.email, data.password)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthResponse.from_result(result.value)


@router.post(
    "/refresh",
    response_model=AuthResponse,
    responses=_ERRORS,
    summary="Rotate refresh token",
)
async def refresh(
    request: Request,
    data: RefreshRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse | JSONResponse:
    """Redeem a refresh token for a new pair. The presented token is revoked."""
    result = await service.refresh(data.refresh_token)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthResponse.from_result(result.value)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
    summary="Logout",
)
async def logout(
    request: Request,
    data: LogoutRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> Response:
    result = await service.logout(data.refresh_token)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/send-verification",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    responses={**_ERRORS, 502: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Send verification link",
)
async def send_verification(
    request: Request,
    current_user: CurrentUser,
    service: Annotated[EmailVerificationService, Depends(get_email_verification_service)],
) -> MessageResponse | JSONResponse:
    """Replace any earlier link for the current user and mail a new one."""
    result = await service.resend_verification_email(current_user.id)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MessageResponse(message="Verification email sent")


@router.post(
    "/verify-email",
    response_model=MessageResponse,
    responses={**_ERRORS, 404: {"model": ProblemDetails}},
    summary="Verify email",
)
async def verify_email(
    request: Request,
    data: VerifyEmailRequest,
    service: Annotated[EmailVerificationService, Depends(get_email_verification_service)],
) -> MessageResponse | JSONResponse:
    result = await service.verify_email(data.token)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MessageResponse(message="Email verified")


@router.get(
    "/verification-status",
    response_model=VerificationStatusResponse,
    responses={401: {"model": ProblemDetails}, 404: {"model": ProblemDetails}},
    summary="Verification status",
)
async def verification_status(
    request: Request,
    current_user: CurrentUser,
    service: Annotated[EmailVerificationService, Depends(get_email_verification_service)],
) -> VerificationStatusResponse | JSONResponse:
    result = await service.get_verification_status(current_user.id)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return VerificationStatusResponse(email_verified=result.value)
