import unittest
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd

from field_comparer.analysis.parsing import (
    has_time_component,
    normalize_to_local_date,
    parse_date,
    parse_number,
)


class TestParseDate(unittest.TestCase):
    def test_absent_and_blank_are_none(self):
        self.assertIsNone(parse_date(None))
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date("   "))

    def test_datetime_passthrough_truncated_to_ms(self):
        d = datetime(2024, 5, 1, 14, 30, 15, 123456)
        self.assertEqual(parse_date(d), datetime(2024, 5, 1, 14, 30, 15, 123000))

    def test_date_becomes_local_midnight(self):
        self.assertEqual(parse_date(date(2024, 5, 1)), datetime(2024, 5, 1))

    def test_iso_strings(self):
        self.assertEqual(parse_date("2024-05-01"), datetime(2024, 5, 1))
        self.assertEqual(parse_date(" 2024-05-01T14:30:00 "), datetime(2024, 5, 1, 14, 30))

    def test_aware_values_are_converted_to_local(self):
        aware = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        expected = aware.astimezone().replace(tzinfo=None)
        self.assertEqual(parse_date(aware), expected)
        self.assertEqual(parse_date("2024-05-01T12:00:00Z"), expected)

    def test_number_is_epoch_milliseconds(self):
        ms = 1_700_000_000_123
        expected = datetime.fromtimestamp(ms / 1000.0)
        expected = expected.replace(microsecond=expected.microsecond - expected.microsecond % 1000)
        self.assertEqual(parse_date(ms), expected)

    def test_pandas_and_numpy_values(self):
        self.assertEqual(parse_date(pd.Timestamp("2024-05-01 08:00")), datetime(2024, 5, 1, 8))
        self.assertEqual(parse_date(np.datetime64("2024-05-01T08:00")), datetime(2024, 5, 1, 8))
        self.assertIsNone(parse_date(pd.NaT))
        self.assertIsNone(parse_date(np.datetime64("NaT")))

    def test_invalid_values_never_raise(self):
        for raw in ("not a date", "2024-13-45", float("nan"), float("inf"), True, [2024, 5, 1], object(), 1e300):
            self.assertIsNone(parse_date(raw), msg=repr(raw))


class TestParseNumber(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(parse_number(5), 5.0)
        self.assertEqual(parse_number(-2.5), -2.5)
        self.assertEqual(parse_number(np.int64(7)), 7.0)
        self.assertEqual(parse_number(np.float32(0.5)), 0.5)

    def test_strings(self):
        self.assertEqual(parse_number("42"), 42.0)
        self.assertEqual(parse_number("  -3.25 "), -3.25)
        self.assertEqual(parse_number("1e3"), 1000.0)

    def test_rejected_values(self):
        for raw in (None, "", "  ", "abc", "nan", "inf", float("nan"), float("-inf"), True, False, [1], {}):
            self.assertIsNone(parse_number(raw), msg=repr(raw))


class TestDateHelpers(unittest.TestCase):
    def test_normalize_strips_time(self):
        self.assertEqual(normalize_to_local_date(datetime(2024, 5, 1, 23, 59, 59)), datetime(2024, 5, 1))

    def test_has_time_component(self):
        self.assertFalse(has_time_component(datetime(2024, 5, 1)))
        self.assertTrue(has_time_component(datetime(2024, 5, 1, 0, 0, 1)))
        self.assertTrue(has_time_component(datetime(2024, 5, 1) + timedelta(milliseconds=1)))


if __name__ == "__main__":
    unittest.main()
