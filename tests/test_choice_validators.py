import unittest

from formcheck.core.result import ValidationResult
from formcheck.validators import validate_checkbox, validate_radio_group


class TestCheckboxValidator(unittest.TestCase):

    def test_required_unchecked(self):
        """Test that a required, unchecked box fails."""
        self.assertEqual(
            validate_checkbox(False, {"required": True}),
            ValidationResult(False, "Please check the checkbox."),
        )

    def test_optional_unchecked(self):
        """Test that an optional box may stay unchecked."""
        self.assertEqual(validate_checkbox(False, {"required": False}), ValidationResult(True, ""))
        self.assertTrue(validate_checkbox(False).is_valid)

    def test_required_checked(self):
        self.assertTrue(validate_checkbox(True, required=True).is_valid)

    def test_custom_message(self):
        result = validate_checkbox(False, required=True, custom_message="Accept the terms")
        self.assertEqual(result.error_message, "Accept the terms")


class TestRadioGroupValidator(unittest.TestCase):

    def test_required_without_selection(self):
        """Test that a required group with no selection fails."""
        result = validate_radio_group("", {"required": True})
        self.assertFalse(result.is_valid)
        self.assertEqual(result.error_message, "Please select a value from the radio group.")

    def test_required_with_selection(self):
        self.assertTrue(validate_radio_group("small", {"required": True}).is_valid)

    def test_optional_without_selection(self):
        self.assertTrue(validate_radio_group("").is_valid)

    def test_whitespace_counts_as_a_selection(self):
        """Test that only the exact empty string means no selection."""
        self.assertTrue(validate_radio_group(" ", {"required": True}).is_valid)

    def test_custom_message(self):
        result = validate_radio_group("", required=True, custom_message="Pick a size")
        self.assertEqual(result.error_message, "Pick a size")


if __name__ == '__main__':
    unittest.main()
