"""
Serializers for Auth API endpoints.
"""

from rest_framework import serializers


class CredentialsRequestSerializer(serializers.Serializer):
    """
    Serializer for register and login requests.

    Blank values are let through so the length and presence rules
    report their own messages.
    """

    login = serializers.CharField(required=True, allow_blank=True, trim_whitespace=False, max_length=150)
    password = serializers.CharField(
        required=True, allow_blank=True, trim_whitespace=False, write_only=True
    )


class AccessTokenResponseSerializer(serializers.Serializer):
    """Serializer for register and login responses."""

    ok = serializers.BooleanField()
    message = serializers.CharField()
    access_token = serializers.CharField()
