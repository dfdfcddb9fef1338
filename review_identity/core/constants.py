"""Application-wide constants."""

# Random bytes in an email verification link token (64 hex characters)
TOKEN_BYTES = 32

# Random bytes in an opaque refresh token (~43 urlsafe characters)
REFRESH_TOKEN_BYTES = 32

# bcrypt only consumes the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

# Minimum signing-key length for HMAC-SHA256 (256 bits)
MIN_SECRET_KEY_BYTES = 32
