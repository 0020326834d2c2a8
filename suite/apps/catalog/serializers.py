from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from apps.api.fields import integer, nested, number, text

MAX_RATE = 5.0


class RatingSerializer(serializers.Serializer):
    rate = number(min_value=0.0, max_value=MAX_RATE)
    count = integer(min_value=0)


class ProductRequestSerializer(serializers.Serializer):
    title = text()
    price = number()
    description = text()
    image = text()
    category = text()

    def validate_price(self, value):
        if value is not None and value <= 0:
            raise serializers.ValidationError(_("Ensure this value is greater than 0."))
        return value


class ProductResponseSerializer(ProductRequestSerializer):
    id = integer()
    rating = nested(RatingSerializer)
