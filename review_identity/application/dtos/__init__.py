"""Application DTOs."""

from review_identity.application.dtos.auth_dtos import AuthResult, UserView

__all__ = ["AuthResult", "UserView"]
