"""Checks that a value is a number within an optional range.

Form inputs usually arrive as strings, so this validator accepts both
strings and numbers. A string is numeric when, after trimming, it is empty
(which counts as zero), a decimal literal with optional sign, fraction and
exponent, `Infinity`, or an unsigned hexadecimal, octal or binary integer
literal such as `0x1F`.
"""
import math
import re
from typing import Any, Dict, Mapping, Optional, Union

from ..core.base_validator import BaseValidator
from ..core.result import ValidationResult

DECIMAL_PATTERN = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)

Number = Union[int, float]


def to_number(value: Any) -> Optional[Number]:
    """Converts a form value to a number.

    Args:
        value (Any): A string, number or boolean.

    Returns:
        Optional[Number]: The numeric value, or None if the value is not
        numeric. NaN is treated as not numeric.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if RADIX_PATTERN.fullmatch(text):
        return int(text, 0)
    return None


class NumberValidator(BaseValidator):
    """Validates a numeric value against an inclusive range.

    Note that the `required` option is accepted for symmetry with the other
    validators but has no effect: the empty string is always rejected.
    """

    name = "Number"
    field_type = "number"
    category = "Numeric"
    description = "Checks that the value is numeric and within the given range."

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "min": -math.inf,
        "max": math.inf,
        "required": False,
        "custom_message": "",
    }

    def _validate(self, value: Any) -> Optional[str]:
        """Performs the numeric range check."""
        number = to_number(value)
        is_valid = (
            not (isinstance(value, str) and value == "")
            and number is not None
            and number >= self.options["min"]
            and number <= self.options["max"]
        )
        if is_valid:
            return None
        return self.message("Please enter a valid number.")


def validate_number_input(value: Any, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ValidationResult:
    """Validates a numeric field.

    Args:
        value (Any): The submitted value, as a string or number.
        options (Optional[Mapping[str, Any]]): Any of `min`, `max`,
            `required` and `custom_message`.
        **kwargs: The same options as keyword arguments.

    Returns:
        ValidationResult: Valid if the value is a number in `[min, max]`.
    """
    return NumberValidator(options, **kwargs).validate(value)
