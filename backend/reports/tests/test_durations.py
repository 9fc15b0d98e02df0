from django.test import SimpleTestCase

from reports.durations import format_duration, format_timestamp


class FormatDurationTests(SimpleTestCase):
    def test_zero(self):
        self.assertEqual(format_duration(0), '0:00:00')

    def test_hours_minutes_seconds(self):
        self.assertEqual(format_duration(3661), '1:01:01')

    def test_negative_keeps_sign_on_whole_value(self):
        self.assertEqual(format_duration(-125), '-0:02:05')
        self.assertEqual(format_duration(-3661.5), '-1:01:01.5')

    def test_fraction_trailing_zeros_stripped(self):
        self.assertEqual(format_duration(1.5), '0:00:01.5')
        self.assertEqual(format_duration(2.25), '0:00:02.25')

    def test_fraction_keeps_leading_zeros(self):
        self.assertEqual(format_duration(0.05), '0:00:00.05')
        self.assertEqual(format_duration(1.001), '0:00:01.001')

    def test_hours_are_not_wrapped(self):
        self.assertEqual(format_duration(90000), '25:00:00')

    def test_sub_millisecond_negative_has_no_sign(self):
        self.assertEqual(format_duration(-0.0001), '0:00:00')

    def test_float_average(self):
        self.assertEqual(format_duration(150.0), '0:02:30')


class FormatTimestampTests(SimpleTestCase):
    def test_epoch(self):
        self.assertEqual(format_timestamp(0), '1970-01-01T00:00:00Z')

    def test_utc(self):
        self.assertEqual(format_timestamp(1700000000), '2023-11-14T22:13:20Z')
