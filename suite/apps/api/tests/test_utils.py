import unittest

import httpx
from rest_framework import status

from apps.api.utils import describe, extract_error_message, is_success


def make_response(status_code, **kwargs):
    request = httpx.Request("GET", "https://store.test/products/99")
    return httpx.Response(status_code, request=request, **kwargs)


class ExtractErrorMessageTests(unittest.TestCase):
    def test_message_and_detail_keys(self):
        self.assertEqual(
            extract_error_message(make_response(404, json={"status": "error", "message": "product not found"})),
            "product not found",
        )
        self.assertEqual(
            extract_error_message(make_response(401, json={"detail": "Not authenticated"})),
            "Not authenticated",
        )

    def test_nested_error_object(self):
        payload = {"error": {"code": "NOT_FOUND", "message": "Resource not found", "status": 404}}
        self.assertEqual(extract_error_message(make_response(404, json=payload)), "Resource not found")

    def test_list_of_strings(self):
        self.assertEqual(
            extract_error_message(make_response(400, json=["limit must be a number"])),
            "limit must be a number",
        )

    def test_plain_text_body(self):
        self.assertEqual(
            extract_error_message(make_response(500, text="Internal Server Error\n")),
            "Internal Server Error",
        )

    def test_fallback_when_nothing_useful(self):
        self.assertEqual(
            extract_error_message(make_response(502, content=b"")),
            "Request failed with status 502",
        )
        self.assertEqual(
            extract_error_message(make_response(400, json={"code": 7}), fallback="Bad input"),
            "Bad input",
        )


class DescribeTests(unittest.TestCase):
    def test_success_summary(self):
        self.assertTrue(is_success(make_response(status.HTTP_201_CREATED, json={})))
        self.assertEqual(describe(make_response(200, json={})), "GET /products/99 -> 200")

    def test_error_summary_includes_message(self):
        response = make_response(404, json={"message": "product not found"})
        self.assertFalse(is_success(response))
        self.assertEqual(describe(response), "GET /products/99 -> 404: product not found")
