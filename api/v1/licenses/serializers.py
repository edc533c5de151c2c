"""
Serializers for License API endpoints.
"""

from rest_framework import serializers

from licenses.domain.license import MAX_DURATION_MINUTES


class AddLicenseRequestSerializer(serializers.Serializer):
    """Serializer for add license request."""

    product = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    one_time = serializers.BooleanField(required=False, default=False)
    expire_time = serializers.IntegerField(
        required=True,
        max_value=MAX_DURATION_MINUTES,
        help_text="Minutes until the license expires (at least 5)",
    )


class ExtendLicenseRequestSerializer(serializers.Serializer):
    """Serializer for extend license request."""

    additional_time = serializers.IntegerField(
        required=True,
        max_value=MAX_DURATION_MINUTES,
        help_text="Minutes to add to the license (at least 5)",
    )


class LicenseKeyResponseSerializer(serializers.Serializer):
    """Serializer for add, invalidate and extend responses."""

    message = serializers.CharField()
    key = serializers.CharField()


class CheckLicenseResponseSerializer(serializers.Serializer):
    """Serializer for the public validity check."""

    valid = serializers.BooleanField()
    expire_time = serializers.DateTimeField(allow_null=True)
    message = serializers.CharField()
