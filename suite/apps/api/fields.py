"""Nullable, optional serializer fields: the remote API may omit any key."""
from rest_framework import serializers


def text(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False, **kwargs
    )


def integer(**kwargs) -> serializers.IntegerField:
    return serializers.IntegerField(required=False, allow_null=True, **kwargs)


def number(**kwargs) -> serializers.FloatField:
    return serializers.FloatField(required=False, allow_null=True, **kwargs)


def nested(serializer_class, **kwargs) -> serializers.Serializer:
    return serializer_class(required=False, allow_null=True, **kwargs)
