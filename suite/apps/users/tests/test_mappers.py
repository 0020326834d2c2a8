import unittest

from apps.users.dtos import AddressDTO, GeolocationDTO, NameDTO, UserResponse
from apps.users.mappers import GeolocationMapper, UserMapper

RAW_USER = {
    "id": 1,
    "email": "john@gmail.com",
    "username": "johnd",
    "password": "m38rmF$",
    "name": {"firstname": "john", "lastname": "doe"},
    "address": {
        "city": "kilcoole",
        "street": "7835 new road",
        "number": 3,
        "zipcode": "12926-3874",
        "geolocation": {"lat": "-37.3159", "long": "81.1496"},
    },
    "phone": "1-570-236-7033",
}


class GeolocationMapperTests(unittest.TestCase):
    def test_prefers_lng_over_long(self):
        self.assertEqual(
            GeolocationMapper.to_dto({"lat": "1", "lng": "2", "long": "3"}),
            GeolocationDTO(lat="1", lng="2"),
        )

    def test_falls_back_to_long(self):
        self.assertEqual(GeolocationMapper.to_dto({"lat": "1", "long": "3"}).lng, "3")

    def test_none(self):
        self.assertIsNone(GeolocationMapper.to_dto(None))


class UserMapperTests(unittest.TestCase):
    def test_to_dto_builds_nested_objects(self):
        user = UserMapper.to_dto(RAW_USER)
        self.assertEqual(user.id, 1)
        self.assertEqual(user.name, NameDTO(firstname="john", lastname="doe"))
        self.assertEqual(user.address.number, 3)
        self.assertEqual(user.address.geolocation.lng, "81.1496")
        self.assertEqual(user.full_name, "john doe")

    def test_missing_nested_objects_stay_none(self):
        user = UserMapper.to_dto({"id": 9, "email": "a@b.c"})
        self.assertIsNone(user.name)
        self.assertIsNone(user.address)
        self.assertIsNone(user.full_name)

    def test_to_request_drops_id(self):
        user = UserMapper.to_dto(RAW_USER)
        request = UserMapper.to_request(user)
        self.assertFalse(hasattr(request, "id"))
        self.assertEqual(request.username, "johnd")
        self.assertEqual(request.address, user.address)

    def test_full_name_with_only_first_name(self):
        self.assertEqual(UserResponse(name=NameDTO(firstname="kate")).full_name, "kate")
        self.assertIsNone(UserResponse(name=NameDTO()).full_name)

    def test_address_equality(self):
        self.assertEqual(
            UserMapper.to_dto(RAW_USER).address,
            AddressDTO(
                city="kilcoole",
                street="7835 new road",
                number=3,
                zipcode="12926-3874",
                geolocation=GeolocationDTO(lat="-37.3159", lng="81.1496"),
            ),
        )
