"""
Base validator class that all field validators inherit from.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from .result import ValidationResult
from ..exceptions import InvalidOptionError

if TYPE_CHECKING:
    from .config import Config

logger = logging.getLogger(__name__)


def format_bound(value: Any) -> str:
    """Renders a length or range bound for use in an error message.

    Integral floats (as read from TOML or JSON) are shown without a trailing
    ".0" and infinities are spelled out.

    Args:
        value (Any): The bound to render.

    Returns:
        str: The display form of the bound.
    """
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _option_kind(value: Any) -> str:
    """Classifies an option value as "bool", "number", "string" or its type name."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


class BaseValidator(ABC):
    """Abstract base class for all field validators.

    Subclasses set the class attributes below and implement `_validate`.
    Options are resolved once, at construction time. The class's
    `DEFAULT_OPTIONS` are overridden by the `validators.<name>` table of an
    optional `Config`, which is overridden by the caller's options.

    Attributes:
        name (str): The display name of the validator, also used as its
            configuration key.
        field_type (str): The form field type this validator handles.
        category (str): A category for grouping validators.
        description (str): One line shown by `formcheck list`.
        empty_value (Any): The value validated when a form omits the field.
    """

    name: str = "UnnamedValidator"
    field_type: str = ""
    category: str = "General"
    description: str = ""
    empty_value: Any = ""

    DEFAULT_OPTIONS: Dict[str, Any] = {}

    def __init__(self, options: Optional[Mapping[str, Any]] = None, config: Optional["Config"] = None, **kwargs: Any) -> None:
        """Initializes the validator and resolves its options.

        Args:
            options (Optional[Mapping[str, Any]]): Options for this
                validator, keyed by snake_case option name.
            config (Optional[Config]): The application's configuration
                object. Its per-validator table supplies defaults that
                `options` and `kwargs` override.
            **kwargs: Options given as keyword arguments. These take
                precedence over `options`.
        """
        self.options: Dict[str, Any] = dict(self.DEFAULT_OPTIONS)
        if config is not None:
            self._merge_options(config.validator_options(self.name))
        if options:
            self._merge_options(options)
        if kwargs:
            self._merge_options(kwargs)

    def _merge_options(self, new: Mapping[str, Any]) -> None:
        for key, value in new.items():
            if key not in self.DEFAULT_OPTIONS:
                logger.warning(f"Ignoring unknown option '{key}' for validator {self.name}")
                continue
            expected = _option_kind(self.DEFAULT_OPTIONS[key])
            if _option_kind(value) != expected:
                raise InvalidOptionError(self.name, key, value, expected)
            self.options[key] = value

    def validate(self, value: Any) -> ValidationResult:
        """Validates a value and returns the result.

        Args:
            value (Any): The value to check.

        Returns:
            ValidationResult: The outcome of the check.
        """
        message = self._validate(value)
        if message:
            # Submitted values may be secrets, so only the message is logged.
            logger.debug(f"{self.name} rejected a value: {message}")
            return ValidationResult.failure(message)
        return ValidationResult.success()

    @abstractmethod
    def _validate(self, value: Any) -> Optional[str]:
        """Checks a value against the resolved options.

        Returns the error message for the first rule the value breaks, or
        None if it passes.
        """
        raise NotImplementedError("Subclasses must implement _validate()")

    def message(self, default: str) -> str:
        """Returns the caller's custom message, falling back to `default`."""
        return self.options.get("custom_message") or default

    def __call__(self, value: Any) -> ValidationResult:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"
