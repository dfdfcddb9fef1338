"""Unit tests for the domain error -> HTTP status mapping."""

import pytest

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import ValidationError
from review_identity.domain.errors import (
    AuthErrors,
    SecretErrors,
    TokenErrors,
    VerificationErrors,
    send_failure,
    store_failure,
)
from review_identity.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (VerificationErrors.CODE_REQUIRED, 400),
        (SecretErrors.INVALID_LENGTH, 400),
        (
            ValidationError(
                code=ErrorCode.INVALID_CREDENTIALS_FORMAT, message="bad", field="email"
            ),
            400,
        ),
        (AuthErrors.INVALID_CREDENTIALS, 401),
        (AuthErrors.INVALID_REFRESH_TOKEN, 401),
        (TokenErrors.EXPIRED, 401),
        (VerificationErrors.EXPIRED, 401),
        (AuthErrors.PERMISSION_DENIED, 403),
        (VerificationErrors.USER_NOT_FOUND, 404),
        (AuthErrors.EMAIL_ALREADY_USED, 409),
        (VerificationErrors.EMAIL_ALREADY_VERIFIED, 409),
        (VerificationErrors.EMAIL_SERVICE_NOT_CONFIGURED, 503),
        (send_failure("timed out"), 502),
        (store_failure("find_user_by_email", RuntimeError("boom")), 500),
    ],
)
def test_status_code_mapping(error, status_code):
    assert ErrorResponseBuilder.get_status_code(error) == status_code
