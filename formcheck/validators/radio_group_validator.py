"""Checks that a required radio group has a selection."""
from typing import Any, Dict, Mapping, Optional

from ..core.base_validator import BaseValidator
from ..core.result import ValidationResult


class RadioGroupValidator(BaseValidator):
    """Validates the selected value of a radio group.

    An empty string means nothing is selected.
    """

    name = "RadioGroup"
    field_type = "radio"
    category = "Choice"
    description = "Checks that a required radio group has a selected value."

    DEFAULT_OPTIONS: Dict[str, Any] = {
        "required": False,
        "custom_message": "",
    }

    def _validate(self, value: Any) -> Optional[str]:
        if not self.options["required"] or value != "":
            return None
        return self.message("Please select a value from the radio group.")


def validate_radio_group(selected_value: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ValidationResult:
    """Validates a radio group selection.

    Args:
        selected_value (str): The selected option's value, or "" for none.
        options (Optional[Mapping[str, Any]]): `required` and
            `custom_message`.
        **kwargs: The same options as keyword arguments.

    Returns:
        ValidationResult: Invalid only if a selection is required and
        missing.
    """
    return RadioGroupValidator(options, **kwargs).validate(selected_value)
