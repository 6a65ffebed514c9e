import math
import unittest

from formcheck.validators.number_validator import to_number, validate_number_input


class TestToNumber(unittest.TestCase):

    def test_numeric_strings(self):
        """Test the string forms that count as numbers."""
        cases = {
            "5": 5.0,
            " 42 ": 42.0,
            "-3.5": -3.5,
            "+7": 7.0,
            ".5": 0.5,
            "5.": 5.0,
            "1e3": 1000.0,
            "2E-2": 0.02,
            "Infinity": math.inf,
            "-Infinity": -math.inf,
            "0x1F": 31,
            "0o17": 15,
            "0b101": 5,
            "": 0,
            "   ": 0,
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(to_number(raw), expected)

    def test_non_numeric_strings(self):
        """Test strings that are not numbers."""
        for raw in ["abc", "5a", "1,000", "1_000", "nan", "inf", "infinity", "-0x10", "0x", "1e", "--1", "٣"]:
            with self.subTest(raw=raw):
                self.assertIsNone(to_number(raw))

    def test_non_string_values(self):
        """Test numbers, booleans and other types."""
        self.assertEqual(to_number(3), 3)
        self.assertEqual(to_number(2.5), 2.5)
        self.assertEqual(to_number(True), 1)
        self.assertEqual(to_number(False), 0)
        self.assertIsNone(to_number(float("nan")))
        self.assertIsNone(to_number(None))
        self.assertIsNone(to_number([1]))


class TestNumberValidator(unittest.TestCase):

    def test_in_range(self):
        """Test that a numeric string inside the range passes."""
        result = validate_number_input("5", {"min": 1, "max": 10})
        self.assertTrue(result.is_valid)
        self.assertEqual(result.error_message, "")

    def test_empty_string_is_invalid(self):
        """Test that the empty string always fails."""
        result = validate_number_input("", {})
        self.assertFalse(result.is_valid)
        self.assertEqual(result.error_message, "Please enter a valid number.")

    def test_bounds_are_inclusive(self):
        """Test that the range endpoints themselves are valid."""
        self.assertTrue(validate_number_input("1", min=1, max=10).is_valid)
        self.assertTrue(validate_number_input(10, min=1, max=10).is_valid)
        self.assertFalse(validate_number_input("0.999", min=1, max=10).is_valid)
        self.assertFalse(validate_number_input(10.5, min=1, max=10).is_valid)

    def test_non_numeric_is_invalid(self):
        """Test that non-numeric input fails with the default message."""
        for value in ["abc", "12abc", None, float("nan")]:
            with self.subTest(value=value):
                self.assertFalse(validate_number_input(value).is_valid)

    def test_whitespace_counts_as_zero(self):
        """Test that a whitespace-only string is treated as zero."""
        self.assertTrue(validate_number_input("  ").is_valid)
        self.assertFalse(validate_number_input("  ", min=1).is_valid)

    def test_required_has_no_effect(self):
        """Test that the required option is accepted but not consulted."""
        self.assertEqual(
            validate_number_input("", {"required": True}),
            validate_number_input("", {"required": False}),
        )
        self.assertTrue(validate_number_input("3", {"required": True}).is_valid)

    def test_custom_message(self):
        """Test that a custom message replaces the default."""
        result = validate_number_input("20", {"max": 10, "custom_message": "Too many"})
        self.assertEqual(result.error_message, "Too many")

    def test_default_range_is_unbounded(self):
        """Test that without bounds any number passes."""
        self.assertTrue(validate_number_input("-1e308").is_valid)
        self.assertTrue(validate_number_input("Infinity").is_valid)


if __name__ == '__main__':
    unittest.main()
