from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Body of every non-2xx catalog response."""

    error = serializers.CharField()
