import unittest
from datetime import datetime

import pytz

from flowcheck import InvalidParamError, MissingParamError
from flowcheck.time_utils import check_date_oozie_tz, check_time_zone, coerce_utc, format_oozie_tz


class OozieTZDateTests(unittest.TestCase):
    def test_valid_date_parses_to_aware_utc(self):
        value = check_date_oozie_tz("2009-02-01T01:00Z", "test")
        self.assertEqual(value, pytz.UTC.localize(datetime(2009, 2, 1, 1, 0)))
        self.assertEqual(value.tzinfo, pytz.UTC)

    def test_missing_utc_designator(self):
        with self.assertRaises(InvalidParamError):
            check_date_oozie_tz("2009-02-01T01:00", "test")

    def test_wrong_delimiter(self):
        with self.assertRaises(InvalidParamError):
            check_date_oozie_tz("2009-02-01U01:00Z", "test")

    def test_rejects_offsets_and_loose_shapes(self):
        for text in (
            "2009-02-01T01:00+0530",
            "2009-02-01T01:00:00Z",
            "2009-2-1T1:00Z",
            "2009-02-01t01:00z",
            "2009-02-01T01:00Z\n",
        ):
            with self.subTest(text=text):
                with self.assertRaises(InvalidParamError):
                    check_date_oozie_tz(text, "test")

    def test_rejects_out_of_range_calendar_fields(self):
        for text in (
            "2009-13-01T01:00Z",
            "2009-02-30T01:00Z",
            "2009-02-01T24:00Z",
            "2009-02-01T01:60Z",
            "2009-00-01T01:00Z",
        ):
            with self.subTest(text=text):
                with self.assertRaises(InvalidParamError):
                    check_date_oozie_tz(text, "test")

    def test_leap_day(self):
        self.assertEqual(check_date_oozie_tz("2012-02-29T23:59Z", "test").day, 29)
        with self.assertRaises(InvalidParamError):
            check_date_oozie_tz("2011-02-29T23:59Z", "test")

    def test_none_is_missing(self):
        with self.assertRaises(MissingParamError):
            check_date_oozie_tz(None, "test")

    def test_format_round_trips(self):
        text = "2009-02-01T01:00Z"
        self.assertEqual(format_oozie_tz(check_date_oozie_tz(text, "test")), text)

    def test_format_converts_to_utc(self):
        eastern = pytz.timezone("US/Eastern")
        local = eastern.localize(datetime(2026, 1, 2, 3, 4))
        self.assertEqual(format_oozie_tz(local), "2026-01-02T08:04Z")


class TimeZoneTests(unittest.TestCase):
    def test_recognized_zones(self):
        self.assertEqual(check_time_zone("UTC", "test").zone, "UTC")
        self.assertEqual(
            check_time_zone("America/Los_Angeles", "test").zone,
            "America/Los_Angeles",
        )

    def test_unrecognized_zones(self):
        for text in ("UTZ", "America/Los_Angles", "utc", "", "GMT+5:30"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidParamError):
                    check_time_zone(text, "test")

    def test_none_is_missing(self):
        with self.assertRaises(MissingParamError):
            check_time_zone(None, "test")


class CoerceUTCTests(unittest.TestCase):
    def test_coerce_utc_localizes_naive(self):
        coerced = coerce_utc(datetime(2026, 1, 2, 3, 4, 5))
        self.assertEqual(coerced.tzinfo, pytz.UTC)
        self.assertEqual(coerced.hour, 3)

    def test_coerce_utc_converts_non_utc_timezone(self):
        eastern = pytz.timezone("US/Eastern")
        local = eastern.localize(datetime(2026, 1, 2, 3, 4, 5))
        coerced = coerce_utc(local)
        self.assertEqual(coerced.tzinfo, pytz.UTC)
        self.assertEqual(coerced.hour, 8)

    def test_coerce_utc_none_passthrough(self):
        self.assertIsNone(coerce_utc(None))


if __name__ == "__main__":
    unittest.main()
