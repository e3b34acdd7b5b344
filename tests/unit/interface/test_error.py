"""Unit tests for domain error to HTTP status mapping."""

import pytest

from stackit.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    TransientDeliveryFailure,
    ValidationError,
)
from stackit.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (NotFoundError("Notification", "abc"), 404),
            (NotAuthorizedError("notification", "abc", "user-1"), 403),
            (ValidationError("Notification has no recipient"), 400),
            (BusinessRuleViolationError("Answer does not belong"), 400),
            (ValueError("badly formed hexadecimal UUID string"), 400),
            (TransientDeliveryFailure("sub-1", "queue full"), 400),
        ],
    )
    def test_domain_errors_map_to_client_errors(self, error, status_code):
        """Each domain error gets its own status."""
        assert to_http_exception(error).status_code == status_code

    def test_unexpected_error_hides_details(self):
        """Anything else is a 500 without the original message."""
        # Act
        http_error = to_http_exception(RuntimeError("connection string leaked"))

        # Assert
        assert http_error.status_code == 500
        assert "leaked" not in http_error.detail
