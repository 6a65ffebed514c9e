"""The field validators shipped with formcheck.

Each module in this package contains one class that inherits from
`formcheck.core.base_validator.BaseValidator`, discovered at runtime by the
form pipeline, plus a plain function wrapping it for direct use.
"""
from .checkbox_validator import CheckboxValidator, validate_checkbox
from .email_validator import EmailValidator, validate_email
from .number_validator import NumberValidator, validate_number_input
from .password_validator import PasswordValidator, validate_password
from .radio_group_validator import RadioGroupValidator, validate_radio_group
from .text_validator import TextValidator, validate_text_input

__all__ = [
    "CheckboxValidator",
    "EmailValidator",
    "NumberValidator",
    "PasswordValidator",
    "RadioGroupValidator",
    "TextValidator",
    "validate_checkbox",
    "validate_email",
    "validate_number_input",
    "validate_password",
    "validate_radio_group",
    "validate_text_input",
]
