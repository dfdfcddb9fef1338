"""Core enums package.

Usage:
    from review_identity.core.enums import ErrorCode, Environment
"""

from review_identity.core.enums.environment import Environment
from review_identity.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
