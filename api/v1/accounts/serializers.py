"""
Serializers for Users API endpoints.
"""

from rest_framework import serializers


class CreateUserRequestSerializer(serializers.Serializer):
    """Serializer for create user request."""

    username = serializers.CharField(required=True, allow_blank=False, max_length=150)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, allow_blank=False, write_only=True)


class RankQuerySerializer(serializers.Serializer):
    """Serializer for ``?token=`` query parameter."""

    token = serializers.CharField(required=True, allow_blank=False, max_length=255)


class UserCreatedResponseSerializer(serializers.Serializer):
    """Serializer for create user response."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    token = serializers.CharField()
    rank = serializers.IntegerField()


class UserRankResponseSerializer(serializers.Serializer):
    """Serializer for rank lookup response."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    rank = serializers.IntegerField()
    rank_name = serializers.CharField()
