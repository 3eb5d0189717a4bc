"""
Serializers for the client application API endpoints.
"""

from rest_framework import serializers


class ValidateKeyRequestSerializer(serializers.Serializer):
    """Serializer for validate key request."""

    keyValue = serializers.CharField(source="key_value", required=True)


class ValidKeyInfoSerializer(serializers.Serializer):
    """Details returned for a valid key."""

    keyValue = serializers.CharField()
    applicationName = serializers.CharField()
    userName = serializers.CharField()
    userContact = serializers.CharField()
    startDate = serializers.DateField()
    endDate = serializers.DateField()


class ValidateKeyResponseSerializer(serializers.Serializer):
    """
    Serializer for validate key response.

    ``info`` holds the key details when valid, ``{"message": ...}`` when the
    key exists but is not valid, and null when the key is unknown.
    """

    status = serializers.BooleanField()
    info = serializers.JSONField(allow_null=True)
