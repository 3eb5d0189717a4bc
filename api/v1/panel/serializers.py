"""
Serializers for the admin panel API endpoints.

Wire field names are camelCase; ``source`` maps them onto the
snake_case attributes of commands and DTOs.
"""

from rest_framework import serializers

from core.domain.value_objects import KeyStatus, Permission


class LoginRequestSerializer(serializers.Serializer):
    """Serializer for sign-in request."""

    email = serializers.CharField(required=True)
    password = serializers.CharField(required=True, trim_whitespace=False)


class PermissionsField(serializers.DictField):
    """Map of permission names to flags."""

    child = serializers.BooleanField()

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        known = {permission.value for permission in Permission}
        unknown = sorted(set(value) - known)
        if unknown:
            raise serializers.ValidationError(f"Unknown permission: {', '.join(unknown)}")
        return value


class UserSerializer(serializers.Serializer):
    """Serializer for UserDTO."""

    id = serializers.UUIDField()
    email = serializers.EmailField()
    name = serializers.CharField()
    role = serializers.CharField()
    permissions = serializers.DictField(child=serializers.BooleanField(), allow_null=True)


class CreateUserRequestSerializer(serializers.Serializer):
    """Serializer for create user request."""

    name = serializers.CharField(required=True, max_length=255)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, trim_whitespace=False)
    permissions = PermissionsField(required=False, default=dict)


class UpdateUserRequestSerializer(serializers.Serializer):
    """Serializer for update user request."""

    name = serializers.CharField(required=True, max_length=255)
    permissions = PermissionsField(required=False, default=dict)


class ApplicationSerializer(serializers.Serializer):
    """Serializer for ApplicationDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()


class ApplicationRequestSerializer(serializers.Serializer):
    """Serializer for create and rename application requests."""

    name = serializers.CharField(required=True, max_length=255)


class LicenseKeySerializer(serializers.Serializer):
    """Serializer for LicenseKeyDTO."""

    id = serializers.UUIDField()
    keyValue = serializers.CharField(source="key_value")
    applicationId = serializers.UUIDField(source="application_id")
    userName = serializers.CharField(source="user_name")
    userContact = serializers.CharField(source="user_contact")
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    isActive = serializers.BooleanField(source="is_active")
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")


class CreateLicenseKeyRequestSerializer(serializers.Serializer):
    """
    Serializer for create license key request.

    ``keyValue`` is generated and ``startDate`` defaults to today when omitted.
    """

    keyValue = serializers.CharField(
        source="key_value", required=False, allow_blank=True, max_length=100
    )
    applicationId = serializers.UUIDField(source="application_id", required=True)
    userName = serializers.CharField(source="user_name", required=True, max_length=255)
    userContact = serializers.CharField(source="user_contact", required=True, max_length=255)
    startDate = serializers.DateField(source="start_date", required=False, allow_null=True)
    endDate = serializers.DateField(source="end_date", required=True)
    isActive = serializers.BooleanField(source="is_active", required=False, default=True)


class UpdateLicenseKeyRequestSerializer(serializers.Serializer):
    """Serializer for update license key request; every editable field is replaced."""

    keyValue = serializers.CharField(source="key_value", required=True, max_length=100)
    applicationId = serializers.UUIDField(source="application_id", required=True)
    userName = serializers.CharField(source="user_name", required=True, max_length=255)
    userContact = serializers.CharField(source="user_contact", required=True, max_length=255)
    startDate = serializers.DateField(source="start_date", required=True)
    endDate = serializers.DateField(source="end_date", required=True)
    isActive = serializers.BooleanField(source="is_active", required=True)


class ListLicenseKeysQuerySerializer(serializers.Serializer):
    """Serializer for list license keys query parameters."""

    status = serializers.ChoiceField(
        choices=[status.value for status in KeyStatus], required=False
    )
    applicationId = serializers.UUIDField(source="application_id", required=False)
    search = serializers.CharField(required=False, allow_blank=True)
