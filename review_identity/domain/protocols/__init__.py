"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits.
"""

from review_identity.domain.protocols.email_sender_protocol import EmailSenderProtocol
from review_identity.domain.protocols.email_verification_repository import (
    EmailVerificationRepository,
)
from review_identity.domain.protocols.logger_protocol import LoggerProtocol
from review_identity.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from review_identity.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from review_identity.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from review_identity.domain.protocols.secret_generator_protocol import (
    SecretGeneratorProtocol,
)
from review_identity.domain.protocols.token_generation_protocol import (
    AccessTokenClaims,
    TokenGenerationProtocol,
)
from review_identity.domain.protocols.user_repository import UserRepository

__all__ = [
    "AccessTokenClaims",
    "EmailSenderProtocol",
    "EmailVerificationRepository",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "RefreshTokenServiceProtocol",
    "SecretGeneratorProtocol",
    "TokenGenerationProtocol",
    "UserRepository",
]
