"""formcheck: validators for form input.

This package provides small, pure validation functions for common form
fields (email, text, number, checkbox, radio group and password), a
combinator that merges several validation results into one, and a form
pipeline and command-line tool built on top of them.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core.config import Config
from .core.form import FieldSpec, FormResult, load_form, validate_form
from .core.result import AggregateResult, ValidationResult
from .core.validator import discover_validators, get_validator, validate_all
from .validators import (
    validate_checkbox,
    validate_email,
    validate_number_input,
    validate_password,
    validate_radio_group,
    validate_text_input,
)

__all__ = [
    "__version__",
    "__license__",
    "AggregateResult",
    "Config",
    "FieldSpec",
    "FormResult",
    "ValidationResult",
    "discover_validators",
    "get_validator",
    "load_form",
    "validate_all",
    "validate_checkbox",
    "validate_email",
    "validate_form",
    "validate_number_input",
    "validate_password",
    "validate_radio_group",
    "validate_text_input",
]
