"""
Serializers for License API endpoints.

Field names follow the request bodies existing clients already send
(``authToken``, ``license``, ``ip``).
"""

from rest_framework import serializers

from licenses.domain.license import MAX_LICENSE_DURATION_DAYS


class CreateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for create license request."""

    authToken = serializers.CharField(required=True, allow_blank=False, max_length=255)
    duration = serializers.IntegerField(
        required=True, min_value=0, max_value=MAX_LICENSE_DURATION_DAYS
    )


class ClaimLicenseRequestSerializer(serializers.Serializer):
    """Serializer for claim license request."""

    license = serializers.CharField(required=True, allow_blank=False, max_length=255)
    owner = serializers.CharField(required=True, allow_blank=False, max_length=255)


class AuthenticateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for authenticate license request; ``ip`` defaults to the client address."""

    license = serializers.CharField(required=True, allow_blank=False, max_length=255)
    ip = serializers.CharField(required=False, allow_blank=False, max_length=64)


class PrivilegedLicenseRequestSerializer(serializers.Serializer):
    """Serializer for suspend and delete requests."""

    authToken = serializers.CharField(required=True, allow_blank=False, max_length=255)
    license = serializers.CharField(required=True, allow_blank=False, max_length=255)


class LicenseQuerySerializer(serializers.Serializer):
    """Serializer for ``?license=`` query parameters."""

    license = serializers.CharField(required=True, allow_blank=False, max_length=255)


class OperationResponseSerializer(serializers.Serializer):
    """Serializer describing the common response envelope."""

    success = serializers.BooleanField()
    code = serializers.CharField(required=False)
    message = serializers.CharField(required=False)


class LicenseCreatedResponseSerializer(OperationResponseSerializer):
    """Serializer for create license response."""

    license = serializers.CharField()
    duration = serializers.IntegerField()


class AuthenticationResponseSerializer(OperationResponseSerializer):
    """Serializer for authenticate response."""

    valid = serializers.BooleanField()
    activated = serializers.BooleanField(required=False)
    reason = serializers.CharField(required=False, allow_null=True)
    expiry = serializers.DateTimeField(required=False, allow_null=True)


class LicenseInfoResponseSerializer(OperationResponseSerializer):
    """Serializer for license info response."""

    license = serializers.CharField()
    owner = serializers.CharField(allow_null=True)
    created = serializers.DateTimeField()
    duration = serializers.IntegerField()
    expiry = serializers.DateTimeField(allow_null=True)
    ip = serializers.CharField(allow_null=True)
    suspended = serializers.BooleanField()
    state = serializers.CharField()
    active = serializers.BooleanField()


class LicenseActiveResponseSerializer(OperationResponseSerializer):
    """Serializer for is-active response."""

    active = serializers.BooleanField()


class LicenseCountResponseSerializer(OperationResponseSerializer):
    """Serializer for license count response."""

    licenses = serializers.IntegerField()
