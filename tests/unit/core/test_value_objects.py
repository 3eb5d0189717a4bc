"""
Unit tests for value objects.
"""
import pytest

from core.domain.value_objects import Email, KeyStatus, Permission, Role


class TestEmail:
    """Tests for Email value object."""

    def test_email_is_lower_cased_and_trimmed(self):
        """Test email normalization."""
        assert Email("  Alice@Example.COM ").value == "alice@example.com"

    def test_emails_compare_by_value(self):
        """Test value equality."""
        assert Email("a@example.com") == Email("A@example.com")
        assert hash(Email("a@example.com")) == hash(Email("A@example.com"))

    @pytest.mark.parametrize("raw", ["", "   ", "not-an-email", None])
    def test_invalid_email_rejected(self, raw):
        """Test invalid emails raise ValueError."""
        with pytest.raises(ValueError):
            Email(raw)


class TestEnums:
    """Tests for enumerations."""

    def test_key_status_wire_values(self):
        """Test status strings."""
        assert [status.value for status in KeyStatus] == [
            "Active",
            "Expired",
            "Pending",
            "Deactivated",
        ]
        assert str(KeyStatus.PENDING) == "Pending"

    def test_permission_labels(self):
        """Test every permission has a label."""
        assert Permission.CREATE_KEYS.label == "Create Keys"
        assert Permission.TOGGLE_KEY_STATUS.label == "Toggle Key Status"
        assert Permission.MANAGE_APPLICATIONS.label == "Manage Applications"
        assert all(permission.label for permission in Permission)

    def test_role_values(self):
        """Test role strings."""
        assert Role("superadmin") is Role.SUPERADMIN
        assert str(Role.ADMIN) == "admin"
