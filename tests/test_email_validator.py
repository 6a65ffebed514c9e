import unittest

from formcheck.validators.email_validator import EmailValidator, validate_email


class TestEmailValidator(unittest.TestCase):

    def test_valid_addresses(self):
        """Test that well-formed addresses pass."""
        for email in ["user@example.com", "first.last@sub.example.co.uk", "a@b.c", "x+tag@host.io"]:
            with self.subTest(email=email):
                result = validate_email(email)
                self.assertTrue(result.is_valid)
                self.assertEqual(result.error_message, "")

    def test_invalid_addresses(self):
        """Test that malformed addresses fail with the fixed message."""
        for email in ["", "plainaddress", "@example.com", "user@", "user@example", "user@@example.com",
                      "us er@example.com", "user@exa mple.com", "user@example.", "user@.com"]:
            with self.subTest(email=email):
                result = validate_email(email)
                self.assertFalse(result.is_valid)
                self.assertEqual(result.error_message, "Invalid email address")

    def test_match_is_anchored(self):
        """Test that surrounding whitespace and trailing newlines are rejected."""
        self.assertFalse(validate_email(" user@example.com").is_valid)
        self.assertFalse(validate_email("user@example.com\n").is_valid)

    def test_non_string_is_coerced(self):
        """Test that non-string input is converted rather than raising."""
        self.assertFalse(validate_email(None).is_valid)
        self.assertFalse(validate_email(12345).is_valid)

    def test_class_interface(self):
        """Test that the validator class can be called directly."""
        validator = EmailValidator()
        self.assertTrue(validator("user@example.com"))
        self.assertFalse(validator("nope"))


if __name__ == '__main__':
    unittest.main()
