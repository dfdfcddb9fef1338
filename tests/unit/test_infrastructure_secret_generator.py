"""Unit tests for SecretGenerator."""

import string

import pytest

from review_identity.core.result import Failure, Success
from review_identity.domain.errors import SecretErrors
from review_identity.infrastructure.security import SecretGenerator


@pytest.mark.unit
class TestSecretGenerator:
    """Test random tokens and numeric codes."""

    def test_random_token_is_64_hex_chars(self):
        token = SecretGenerator().random_token()

        assert len(token) == 64
        assert set(token) <= set(string.hexdigits.lower())

    def test_random_tokens_differ(self):
        generator = SecretGenerator()

        assert len({generator.random_token() for _ in range(50)}) == 50

    @pytest.mark.parametrize("digits", [1, 4, 6, 9])
    def test_numeric_code_has_exact_length(self, digits):
        generator = SecretGenerator()

        for _ in range(50):
            result = generator.numeric_code(digits)
            assert isinstance(result, Success)
            assert len(result.value) == digits
            assert result.value.isdigit()

    def test_numeric_code_is_zero_padded(self, monkeypatch):
        monkeypatch.setattr(
            "review_identity.infrastructure.security.secret_generator.secrets.randbelow",
            lambda bound: 42,
        )

        assert SecretGenerator().numeric_code(6) == Success(value="000042")

    @pytest.mark.parametrize("digits", [0, -1])
    def test_non_positive_length_rejected(self, digits):
        assert SecretGenerator().numeric_code(digits) == Failure(
            error=SecretErrors.INVALID_LENGTH
        )
