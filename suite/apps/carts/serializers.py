from rest_framework import serializers

from apps.api.fields import integer, nested, text


class CartItemSerializer(serializers.Serializer):
    productId = integer(source="product_id")
    quantity = integer(min_value=1)


class CartRequestSerializer(serializers.Serializer):
    # camelCase on the wire, snake_case on the DTOs
    userId = integer(source="user_id")
    date = text()
    products = nested(CartItemSerializer, many=True)


class CartResponseSerializer(serializers.Serializer):
    id = integer()
    userId = integer(source="user_id")
    date = text()
    products = nested(CartItemSerializer, many=True)
