"""Checks that a required checkbox has been ticked."""
from typing import Any, Dict, Mapping, Optional

from ..core.base_validator import BaseValidator
from ..core.result import ValidationResult


class CheckboxValidator(BaseValidator):
    """Validates the checked state of a checkbox."""

    name = "Checkbox"
    field_type = "checkbox"
    category = "Choice"
    description = "Checks that a required checkbox is checked."
    empty_value = False

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "required": False,
        "custom_message": "",
    }

    def _validate(self, value: Any) -> Optional[str]:
        if not self.options["required"] or value:
            return None
        return self.message("Please check the checkbox.")


def validate_checkbox(is_checked: bool, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ValidationResult:
    """Validates a checkbox.

    Args:
        is_checked (bool): Whether the box is checked.
        options (Optional[Mapping[str, Any]]): `required` and
            `custom_message`.
        **kwargs: The same options as keyword arguments.

    Returns:
        ValidationResult: Invalid only if the box is required and unchecked.
    """
    return CheckboxValidator(options, **kwargs).validate(is_checked)
