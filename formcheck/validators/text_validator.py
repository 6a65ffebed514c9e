"""Checks free-form text fields for presence and length."""
import math
from typing import Any, Dict, Mapping, Optional

from ..core.base_validator import BaseValidator, format_bound
from ..core.result import ValidationResult


class TextValidator(BaseValidator):
    """Validates a text value after trimming surrounding whitespace.

    Rules are checked in order and only the first failure is reported:
    required, then minimum length, then maximum length.
    """

    name = "Text"
    field_type = "text"
    category = "Text"
    description = "Checks that trimmed text is present and within length limits."

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "min_length": 0,
        "max_length": math.inf,
        "required": False,
        "custom_message": "",
    }

    def _validate(self, value: str) -> Optional[str]:
        """Performs the text checks."""
        min_length = self.options["min_length"]
        max_length = self.options["max_length"]
        length = len(value.strip())

        if self.options["required"] and length == 0:
            return self.message("Field is required.")
        if length < min_length:
            return self.message(f"Minimum {format_bound(min_length)} characters required.")
        if length > max_length:
            return self.message(f"Maximum {format_bound(max_length)} characters allowed.")
        return None


def validate_text_input(text: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ValidationResult:
    """Validates a text field.

    Args:
        text (str): The submitted text.
        options (Optional[Mapping[str, Any]]): Any of `min_length`,
            `max_length`, `required` and `custom_message`.
        **kwargs: The same options as keyword arguments.

    Returns:
        ValidationResult: The outcome of the first failing rule, or a valid
        result.
    """
    return TextValidator(options, **kwargs).validate(text)
