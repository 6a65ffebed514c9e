"""Validates whole forms.

A form is an ordered list of field definitions plus the submitted values.
Each field names a validator by its type and may carry options for it.
Forms can be built in code or loaded from a TOML or JSON file shaped like:

    [[fields]]
    name = "email"
    type = "email"

    [[fields]]
    name = "password"
    type = "password"
    options = { min_length = 8, require_number = true }

    [values]
    email = "ada@example.com"
    password = "hunter22"
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .base_validator import BaseValidator
from .config import Config
from .result import ValidationResult
from .validator import get_validator, validate_all
from ..exceptions import FormDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """A single field of a form.

    Attributes:
        name (str): The key of the field's value in the submitted data.
        type (str): The field type, selecting the validator.
        options (Dict[str, Any]): Options for the validator.
    """

    name: str
    type: str
    options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldSpec":
        """Builds a FieldSpec from a parsed TOML or JSON table.

        Raises:
            FormDefinitionError: If the table is missing a name or type, or
                its options are not a table.
        """
        if not isinstance(data, Mapping):
            raise FormDefinitionError(f"Field definition must be a table, got {type(data).__name__}")
        name = data.get("name")
        field_type = data.get("type")
        options = data.get("options", {})
        if not isinstance(name, str) or not name:
            raise FormDefinitionError("Field definition is missing a 'name'")
        if not isinstance(field_type, str) or not field_type:
            raise FormDefinitionError(f"Field '{name}' is missing a 'type'")
        if not isinstance(options, Mapping):
            raise FormDefinitionError(f"Options for field '{name}' must be a table")
        return cls(name=name, type=field_type, options=dict(options))


@dataclass(frozen=True)
class FormResult:
    """The outcome of validating a form.

    Attributes:
        is_valid (bool): True only if every validated field passed.
        error_messages (List[str]): Error messages in field order.
        fields (Dict[str, ValidationResult]): Per-field results. Skipped
            fields are absent.
    """

    is_valid: bool
    error_messages: List[str] = field(default_factory=list)
    fields: Dict[str, ValidationResult] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "error_messages": list(self.error_messages),
            "fields": {name: result.to_dict() for name, result in self.fields.items()},
        }


def _field_check(name: str, validator: BaseValidator, value: Any, results: Dict[str, ValidationResult]) -> Callable[[], ValidationResult]:
    """Returns a thunk that validates one field and records the result."""
    def run() -> ValidationResult:
        result = validator.validate(value)
        results[name] = result
        return result
    return run


def validate_form(
    fields: Sequence[Union[FieldSpec, Mapping[str, Any]]],
    values: Mapping[str, Any],
    config: Optional[Config] = None,
) -> FormResult:
    """Validates every field of a form.

    Args:
        fields (Sequence[Union[FieldSpec, Mapping[str, Any]]]): The form's
            field definitions, in display order.
        values (Mapping[str, Any]): The submitted values keyed by field
            name. Missing or null fields are validated as the validator's
            empty value.
        config (Optional[Config]): Supplies per-validator option defaults
            and enable/disable switches.

    Returns:
        FormResult: The aggregate outcome and the result for each field.

    Raises:
        UnknownFieldTypeError: If a field's type has no validator.
        FormDefinitionError: If a field definition is malformed or a field
            name is repeated.
        InvalidOptionError: If a field's options have the wrong types.
    """
    specs = [spec if isinstance(spec, FieldSpec) else FieldSpec.from_dict(spec) for spec in fields]
    field_results: Dict[str, ValidationResult] = {}
    checks = []
    seen = set()

    for spec in specs:
        if spec.name in seen:
            raise FormDefinitionError(f"Duplicate field name: '{spec.name}'")
        seen.add(spec.name)

        validator_cls = get_validator(spec.type)
        if config is not None and not config.is_validator_enabled(validator_cls.name):
            logger.info(f"Skipping field '{spec.name}': validator {validator_cls.name} is disabled")
            continue

        validator = validator_cls(spec.options, config=config)
        value = values.get(spec.name)
        if value is None:
            value = validator.empty_value
        checks.append(_field_check(spec.name, validator, value, field_results))

    logger.info(f"Validating form with {len(checks)} field(s)")
    aggregate = validate_all(checks)
    return FormResult(
        is_valid=aggregate.is_valid,
        error_messages=aggregate.error_messages,
        fields=field_results,
    )


def load_form(path: Union[str, Path]) -> Tuple[List[FieldSpec], Dict[str, Any]]:
    """Loads a form definition from a TOML or JSON file.

    Args:
        path (Union[str, Path]): The file to read. The format is chosen by
            the `.json` or `.toml` suffix.

    Returns:
        Tuple[List[FieldSpec], Dict[str, Any]]: The field definitions and
        the submitted values (empty if the file has no `values` table).

    Raises:
        FormDefinitionError: If the file cannot be read or parsed, or its
            contents are not a valid form definition.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".json", ".toml"):
        raise FormDefinitionError(f"Unsupported form file type: '{path.suffix}' (expected .toml or .json)")

    logger.debug(f"Loading form definition from {path}")
    try:
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, ValueError) as e:
        # JSONDecodeError and TOMLDecodeError are both ValueErrors.
        raise FormDefinitionError(f"Could not read form definition from {path}: {e}") from e

    if not isinstance(data, dict):
        raise FormDefinitionError("Form definition must be a table at the top level")
    raw_fields = data.get("fields")
    if not isinstance(raw_fields, list):
        raise FormDefinitionError("Form definition must contain a 'fields' array")
    values = data.get("values", {})
    if not isinstance(values, dict):
        raise FormDefinitionError("'values' must be a table")

    return [FieldSpec.from_dict(raw) for raw in raw_fields], values
