"""Checks password strength rules.

Passwords are checked as given, without trimming. The rules run in a fixed
order and the first one that fails decides the message:

-   minimum and maximum length,
-   an ASCII uppercase letter, if required,
-   an ASCII lowercase letter, if required,
-   a digit, if required,
-   a special character from `!@#$%^&*(),.?":{}|<>`, if required.
"""
import math
import re
from typing import Any, Dict, Mapping, Optional

from ..core.base_validator import BaseValidator, format_bound
from ..core.result import ValidationResult

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
NUMBER_PATTERN = re.compile(r"[0-9]")
SPECIAL_CHAR_PATTERN = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


class PasswordValidator(BaseValidator):
    """Validates a password against length and character class rules."""

    name = "Password"
    field_type = "password"
    category = "Security"
    description = "Checks password length and required character classes."

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "min_length": 0,
        "max_length": math.inf,
        "require_uppercase": False,
        "require_lowercase": False,
        "require_number": False,
        "require_special_char": False,
        "custom_message": "",
    }

    # (option, pattern, default message), checked in this order after length.
    CHARACTER_RULES = (
        ("require_uppercase", UPPERCASE_PATTERN, "Password must contain at least one uppercase letter."),
        ("require_lowercase", LOWERCASE_PATTERN, "Password must contain at least one lowercase letter."),
        ("require_number", NUMBER_PATTERN, "Password must contain at least one number."),
        ("require_special_char", SPECIAL_CHAR_PATTERN, "Password must contain at least one special character."),
    )

    def _validate(self, value: str) -> Optional[str]:
        """Performs the password checks."""
        min_length = self.options["min_length"]
        max_length = self.options["max_length"]

        if len(value) < min_length:
            return self.message(f"Minimum {format_bound(min_length)} characters required.")
        if len(value) > max_length:
            return self.message(f"Maximum {format_bound(max_length)} characters allowed.")

        for option, pattern, default_message in self.CHARACTER_RULES:
            if self.options[option] and not pattern.search(value):
                return self.message(default_message)
        return None


def validate_password(password: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ValidationResult:
    """Validates a password.

    Args:
        password (str): The password to check.
        options (Optional[Mapping[str, Any]]): Any of `min_length`,
            `max_length`, `require_uppercase`, `require_lowercase`,
            `require_number`, `require_special_char` and `custom_message`.
        **kwargs: The same options as keyword arguments.

    Returns:
        ValidationResult: The outcome of the first failing rule, or a valid
        result.
    """
    return PasswordValidator(options, **kwargs).validate(password)
