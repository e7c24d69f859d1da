from __future__ import annotations

import unittest

from tools.captions.time_codec import format_timestamp, format_vtt_timestamp, parse_timestamp


class ParseTimestampTest(unittest.TestCase):
    def test_full_timestamp(self) -> None:
        self.assertEqual(parse_timestamp("01:02:03.456"), 3_723_456)

    def test_minutes_and_seconds_only(self) -> None:
        self.assertEqual(parse_timestamp("02:03.500"), 123_500)

    def test_seconds_only(self) -> None:
        self.assertEqual(parse_timestamp("7.25"), 7_250)

    def test_non_numeric_field_counts_as_zero(self) -> None:
        self.assertEqual(parse_timestamp("xx:01:00.000"), 60_000)
        self.assertEqual(parse_timestamp("00:00:abc"), 0)
        self.assertEqual(parse_timestamp(""), 0)

    def test_fractional_rounding(self) -> None:
        self.assertEqual(parse_timestamp("00:00:01.235"), 1_235)


class FormatTimestampTest(unittest.TestCase):
    def test_omits_hours_below_one_hour(self) -> None:
        self.assertEqual(format_timestamp(0), "00:00.000")
        self.assertEqual(format_timestamp(83_007), "01:23.007")
        self.assertEqual(format_timestamp(3_599_999), "59:59.999")

    def test_shows_hours_from_one_hour(self) -> None:
        self.assertEqual(format_timestamp(3_600_000), "01:00:00.000")
        self.assertEqual(format_timestamp(37_230_045), "10:20:30.045")

    def test_vtt_format_always_shows_hours(self) -> None:
        self.assertEqual(format_vtt_timestamp(1_000), "00:00:01.000")
        self.assertEqual(format_vtt_timestamp(3_723_456), "01:02:03.456")

    def test_numeric_round_trip_through_vtt_format(self) -> None:
        for value in ["00:00:00.000", "00:00:01.001", "00:59:59.999", "01:00:00.000", "12:34:56.789"]:
            with self.subTest(value=value):
                ms = parse_timestamp(value)
                self.assertEqual(parse_timestamp(format_vtt_timestamp(ms)), ms)
                self.assertEqual(format_vtt_timestamp(ms), value)


if __name__ == "__main__":
    unittest.main()
