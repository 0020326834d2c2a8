from rest_framework import serializers

from apps.api.fields import integer, nested, text


class GeolocationSerializer(serializers.Serializer):
    lat = text()
    lng = text()
    # The live service spells longitude 'long'; accepted on read only.
    long = text(write_only=True)


class NameSerializer(serializers.Serializer):
    firstname = text()
    lastname = text()


class AddressSerializer(serializers.Serializer):
    city = text()
    street = text()
    number = integer()
    zipcode = text()
    geolocation = nested(GeolocationSerializer)


class UserRequestSerializer(serializers.Serializer):
    email = text()
    username = text()
    password = text()
    name = nested(NameSerializer)
    address = nested(AddressSerializer)
    phone = text()


class UserResponseSerializer(UserRequestSerializer):
    id = integer()
