import unittest
from dataclasses import dataclass
from unittest.mock import Mock

from apps.common.endpoint import GenericEndpoint, limit_params, sort_params


@dataclass
class StubPayload:
    title: str = "x"


class StubEndpoint(GenericEndpoint):
    collection_path = "/things"
    item_path = "/things/{id}"


class QueryParamTests(unittest.TestCase):
    def test_limit_accepts_positive_integers(self):
        self.assertEqual(limit_params(3), {"limit": 3})

    def test_limit_rejects_zero_negative_and_non_integers(self):
        for value in (0, -1, 2.5, "3", True, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    limit_params(value)

    def test_sort_normalizes_case_and_whitespace(self):
        self.assertEqual(sort_params(" DESC "), {"sort": "desc"})
        self.assertEqual(sort_params("asc"), {"sort": "asc"})

    def test_sort_rejects_unknown_orders(self):
        for value in ("up", "", None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    sort_params(value)


class GenericEndpointTests(unittest.TestCase):
    def setUp(self):
        self.client = Mock()
        self.endpoint = StubEndpoint(self.client)

    def test_item_operations_use_item_path_with_id(self):
        self.endpoint.get_by_id(4)
        self.client.get.assert_called_once_with("/things/{id}", path_params={"id": 4})
        self.endpoint.delete(4)
        self.client.delete.assert_called_once_with("/things/{id}", path_params={"id": 4})

    def test_writes_send_payload_as_json(self):
        payload = StubPayload()
        self.endpoint.create(payload)
        self.client.post.assert_called_once_with("/things", json=payload)
        self.endpoint.update(2, payload)
        self.client.put.assert_called_once_with("/things/{id}", path_params={"id": 2}, json=payload)
        self.endpoint.partial_update(2, payload)
        self.client.patch.assert_called_once_with("/things/{id}", path_params={"id": 2}, json=payload)

    def test_mapping_payloads_drop_none_values(self):
        self.endpoint.create({"title": "x", "price": None, "rating": {"rate": None, "count": 1}})
        _, kwargs = self.client.post.call_args
        self.assertEqual(kwargs["json"], {"title": "x", "rating": {"count": 1}})

    def test_query_passes_params_to_collection(self):
        self.endpoint.query(limit=2)
        self.client.get.assert_called_once_with("/things", params={"limit": 2})
