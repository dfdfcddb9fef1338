"""Unit tests for store_call.

Tests cover:
- Success passthrough
- Exceptions become Failure(STORE_FAILURE) without echoing the exception text
"""

import pytest

from review_identity.application.services.store_call import store_call
from review_identity.core.enums import ErrorCode
from review_identity.core.result import Failure, Success

CODE = "913377"


async def _returns(value):
    return value


async def _raises(error):
    raise error


@pytest.mark.unit
class TestStoreCall:
    """Test store_call."""

    async def test_success_passthrough(self, mock_logger):
        result = await store_call("count_users", _returns(3), mock_logger)

        assert result == Success(value=3)
        mock_logger.error.assert_not_called()

    async def test_exception_text_is_not_logged_or_returned(self, mock_logger):
        """A driver error quoting bound parameters must not leak them."""
        error = RuntimeError(
            f"(sqlite3.IntegrityError) [parameters: ('reader@example.com', '{CODE}')]"
        )

        result = await store_call("create_registration_code", _raises(error), mock_logger)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_FAILURE
        assert "create_registration_code" in result.error.message
        assert CODE not in result.error.message
        assert CODE not in repr(result.error.details)
        mock_logger.error.assert_called_once_with(
            "store_operation_failed",
            operation="create_registration_code",
            error_type="RuntimeError",
        )
