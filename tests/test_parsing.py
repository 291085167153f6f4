"""
Test per i parser di stringhe orarie (h:m:s e h,m,s)
"""
import unittest

from time_calculator.core import (
    ParseError,
    TimeValue,
    clock_to_time,
    clock_to_seconds,
    csv_to_time,
    csv_to_seconds,
    parse_time,
    parse_seconds,
)


class TestClockParser(unittest.TestCase):
    """Test formato con i due punti"""

    def test_clock_to_seconds(self):
        self.assertEqual(clock_to_seconds("1:03:45"), 3825)
        self.assertEqual(clock_to_seconds("0:59:59"), 3599)
        self.assertEqual(clock_to_seconds("00:00:00"), 0)

    def test_clock_to_time_keeps_fields_as_given(self):
        self.assertEqual(clock_to_time("2:91:-60"), TimeValue(2, 91, -60))
        self.assertEqual(clock_to_time("01:02:03"), TimeValue(1, 2, 3))

    def test_wrong_token_count(self):
        for text in ("1:02", "1:2:3:4", "", "123"):
            with self.assertRaises(ParseError):
                clock_to_time(text)

    def test_non_integer_token(self):
        with self.assertRaises(ParseError) as ctx:
            clock_to_time("a:b:c")
        self.assertEqual(ctx.exception.text, "a:b:c")
        self.assertEqual(ctx.exception.delimiter, ":")
        with self.assertRaises(ParseError):
            clock_to_seconds("1:2.5:0")
        with self.assertRaises(ParseError):
            clock_to_seconds("1::0")

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            clock_to_time("1:02")


class TestCsvParser(unittest.TestCase):
    """Test formato con le virgole"""

    def test_csv_to_seconds(self):
        self.assertEqual(csv_to_seconds("1,1,1"), 3661)
        self.assertEqual(csv_to_seconds("0,-30,0"), -1800)
        self.assertEqual(csv_to_time("1,3,45"), TimeValue(1, 3, 45))

    def test_delimiters_are_not_mixed(self):
        with self.assertRaises(ParseError):
            csv_to_time("1:03:45")
        with self.assertRaises(ParseError):
            clock_to_time("1,1,1")


class TestParseDispatch(unittest.TestCase):
    def test_named_formats(self):
        self.assertEqual(parse_time("1:03:45", "clock"), TimeValue(1, 3, 45))
        self.assertEqual(parse_seconds("1,1,1", "csv"), 3661)
        self.assertEqual(parse_seconds("0:0:5"), 5)

    def test_unknown_format(self):
        with self.assertRaises(ValueError) as ctx:
            parse_time("1:2:3", "tsv")
        self.assertNotIsInstance(ctx.exception, ParseError)
        self.assertEqual(str(ctx.exception), "Unsupported format: 'tsv' (use one of clock, csv)")


if __name__ == "__main__":
    unittest.main()
