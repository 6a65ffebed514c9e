"""Exceptions raised by formcheck.

Validators themselves never raise for bad input, they return a failed
result instead. These exceptions cover the layers around them: looking up
validators by field type and reading form definitions.
"""


class FormCheckError(Exception):
    """Base class for all formcheck errors."""


class UnknownFieldTypeError(FormCheckError, ValueError):
    """Raised when no validator is registered for a field type."""

    def __init__(self, field_type: str) -> None:
        self.field_type = field_type
        super().__init__(f"Unknown field type: '{field_type}'")


class FormDefinitionError(FormCheckError, ValueError):
    """Raised when a form definition is malformed or cannot be read."""


class InvalidOptionError(FormCheckError, ValueError):
    """Raised when a validator option has the wrong type."""

    def __init__(self, validator_name: str, option: str, value: object, expected: str) -> None:
        self.validator_name = validator_name
        self.option = option
        self.value = value
        super().__init__(
            f"Option '{option}' for validator {validator_name} must be a {expected}, "
            f"got {type(value).__name__} {value!r}"
        )
