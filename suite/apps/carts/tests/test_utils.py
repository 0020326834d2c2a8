import unittest
from datetime import date, datetime

from apps.carts.utils import format_query_date


class FormatQueryDateTests(unittest.TestCase):
    def test_dates_and_datetimes(self):
        self.assertEqual(format_query_date(date(2020, 1, 1)), "2020-01-01")
        self.assertEqual(format_query_date(datetime(2020, 3, 2, 18, 30)), "2020-03-02")

    def test_iso_strings_are_trimmed_to_the_date(self):
        self.assertEqual(format_query_date("2020-03-02T00:00:00.000Z"), "2020-03-02")
        self.assertEqual(format_query_date(" 2019-12-10 "), "2019-12-10")

    def test_invalid_strings(self):
        for value in ("yesterday", "2020-13-01", ""):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    format_query_date(value)

    def test_other_types(self):
        with self.assertRaises(TypeError):
            format_query_date(20200101)

