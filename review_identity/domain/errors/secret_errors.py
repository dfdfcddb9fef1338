"""Secret generation errors."""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import ValidationError


class SecretErrors:
    """Secret generator error constants."""

    INVALID_LENGTH = ValidationError(
        code=ErrorCode.INVALID_LENGTH,
        message="Code length must be a positive number of digits",
        field="digits",
    )
