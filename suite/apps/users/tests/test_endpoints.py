import unittest

from apps.api.http import ApiClient
from apps.api.steps import StepRecorder
from apps.api.testing import RecordingTransport
from apps.users.container import build_users_endpoint
from apps.users.dtos import AddressDTO, GeolocationDTO, NameDTO, UserRequest


def new_user():
    return UserRequest(
        email="test.user@example.com",
        username="testuser",
        password="secret123",
        name=NameDTO(firstname="Test", lastname="User"),
        address=AddressDTO(
            city="Istanbul",
            street="Test Street",
            number=42,
            zipcode="34000",
            geolocation=GeolocationDTO(lat="41.0082", lng="28.9784"),
        ),
        phone="1-555-0100",
    )


class UsersEndpointContractTests(unittest.TestCase):
    def setUp(self):
        self.transport = RecordingTransport()
        self.recorder = StepRecorder()
        self.client = ApiClient(
            "https://store.test", transport=self.transport, listeners=[self.recorder]
        )
        self.addCleanup(self.client.close)
        self.users = build_users_endpoint(self.client)

    def test_list_all(self):
        self.users.list_all()
        self.assertEqual(self.transport.last.method, "GET")
        self.assertEqual(self.transport.last.url.path, "/users")
        self.assertEqual(self.recorder.titles, ["Get all users"])

    def test_get_by_id(self):
        self.users.get_by_id(3)
        self.assertEqual(self.transport.last.url.path, "/users/3")
        self.assertEqual(self.recorder.titles, ["Get user by ID: 3"])

    def test_create_sends_nested_payload(self):
        self.users.create(new_user())
        request = self.transport.last
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.path, "/users")
        body = self.transport.last_json()
        self.assertNotIn("id", body)
        self.assertEqual(body["name"], {"firstname": "Test", "lastname": "User"})
        self.assertEqual(body["address"]["number"], 42)
        self.assertEqual(body["address"]["geolocation"], {"lat": "41.0082", "lng": "28.9784"})

    def test_update_and_delete(self):
        self.users.update(2, UserRequest(email="new@example.com"))
        self.assertEqual(self.transport.last.method, "PUT")
        self.assertEqual(self.transport.last.url.path, "/users/2")
        self.assertEqual(self.transport.last_json(), {"email": "new@example.com"})
        self.users.delete(2)
        self.assertEqual(self.transport.last.method, "DELETE")
        self.assertEqual(self.transport.last.url.path, "/users/2")
        self.assertEqual(
            self.recorder.titles, ["Update user with ID: 2", "Delete user with ID: 2"]
        )

    def test_query_operations(self):
        self.users.limit(2)
        self.assertEqual(dict(self.transport.last.url.params), {"limit": "2"})
        self.users.sorted_by("asc")
        self.assertEqual(dict(self.transport.last.url.params), {"sort": "asc"})
        self.users.for_user(4)
        self.assertEqual(dict(self.transport.last.url.params), {"userId": "4"})
        self.assertEqual(len(self.transport.requests), 3)

    def test_sort_rejects_unknown_order(self):
        with self.assertRaises(ValueError):
            self.users.sorted_by("sideways")
        self.assertEqual(self.transport.requests, [])
