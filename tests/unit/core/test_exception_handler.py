"""
Unit tests for the API exception handler.
"""
from django.http import Http404
from rest_framework.exceptions import NotAuthenticated, ValidationError

from api.exceptions import custom_exception_handler
from core.domain.exceptions import (
    ApplicationInUseError,
    DuplicateKeyValueError,
    InvalidCredentialsError,
    InvalidKeyPeriodError,
    LicenseKeyNotFoundError,
    PermissionDeniedError,
    SuperAdminProtectedError,
)


class TestCustomExceptionHandler:
    """Tests for custom_exception_handler."""

    def test_not_found(self):
        response = custom_exception_handler(LicenseKeyNotFoundError(), {})

        assert response.status_code == 404
        assert response.data == {
            "error": {"code": "LICENSE_KEY_NOT_FOUND", "message": "License key not found"}
        }

    def test_conflict(self):
        response = custom_exception_handler(DuplicateKeyValueError(), {})

        assert response.status_code == 409
        assert response.data["error"]["message"] == "A license key with this value already exists."

    def test_unauthorized_and_forbidden(self):
        assert custom_exception_handler(InvalidCredentialsError(), {}).status_code == 401
        assert custom_exception_handler(PermissionDeniedError(), {}).status_code == 403
        assert custom_exception_handler(SuperAdminProtectedError(), {}).status_code == 403

    def test_other_domain_errors_are_bad_requests(self):
        """Test business rule violations default to 400."""
        response = custom_exception_handler(ApplicationInUseError(), {})

        assert response.status_code == 400
        assert response.data["error"] == {
            "code": "APPLICATION_IN_USE",
            "message": "Cannot delete: application is in use by one or more keys.",
        }
        assert custom_exception_handler(InvalidKeyPeriodError(), {}).status_code == 400

    def test_validation_error_names_the_field(self):
        response = custom_exception_handler(
            ValidationError({"endDate": ["This field is required."]}), {}
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "VALIDATION_ERROR"
        assert response.data["error"]["message"] == "endDate: This field is required."
        assert "endDate" in response.data["error"]["fields"]

    def test_value_error(self):
        response = custom_exception_handler(ValueError("keyValue is required"), {})

        assert response.status_code == 400
        assert response.data == {
            "error": {"code": "VALIDATION_ERROR", "message": "keyValue is required"}
        }

    def test_drf_exception_keeps_its_code(self):
        response = custom_exception_handler(NotAuthenticated(), {})

        assert response.status_code == 401
        assert response.data["error"]["code"] == "NOT_AUTHENTICATED"

    def test_http_404(self):
        response = custom_exception_handler(Http404(), {})

        assert response.status_code == 404
        assert response.data["error"]["code"] == "NOT_FOUND"

    def test_unexpected_error_hides_details(self):
        response = custom_exception_handler(RuntimeError("database exploded"), {})

        assert response.status_code == 500
        assert response.data == {
            "error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}
        }
