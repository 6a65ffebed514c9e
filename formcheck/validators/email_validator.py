"""Checks that a value looks like an email address.

The check is intentionally shallow: a local part, an `@`, and a domain that
contains at least one dot, none of them containing whitespace or a second
`@`. It does not try to implement the full address grammar.
"""
import re
from typing import Any, Optional

from ..core.base_validator import BaseValidator
from ..core.result import ValidationResult

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class EmailValidator(BaseValidator):
    """Validates an email address against a simple pattern."""

    name = "Email"
    field_type = "email"
    category = "Text"
    description = "Checks that the value is shaped like an email address."

    def _validate(self, value: Any) -> Optional[str]:
        """Performs the email pattern match."""
        if EMAIL_PATTERN.fullmatch(str(value)):
            return None
        return "Invalid email address"


def validate_email(email: Any) -> ValidationResult:
    """Validates an email address.

    Args:
        email (Any): The address to check. Non-string values are converted
            with `str()` before matching.

    Returns:
        ValidationResult: Valid if the whole value matches the pattern.
    """
    return EmailValidator().validate(email)
