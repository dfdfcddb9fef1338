"""Security adapters: password hashing, access tokens, refresh tokens, secrets."""

from review_identity.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from review_identity.infrastructure.security.jwt_service import JWTService
from review_identity.infrastructure.security.refresh_token_service import (
    RefreshTokenService,
)
from review_identity.infrastructure.security.secret_generator import SecretGenerator

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "RefreshTokenService",
    "SecretGenerator",
]
