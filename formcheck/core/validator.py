"""Runs validators and merges their results.

This module holds the aggregator, `validate_all`, which runs a sequence of
deferred validator calls and merges their outcomes, and the discovery
helpers the form pipeline uses to find a validator class for each field
type.
"""

import inspect
import logging
import pkgutil
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Type

from .base_validator import BaseValidator
from .result import AggregateResult, ValidationResult
from ..exceptions import UnknownFieldTypeError
from .. import validators as validators_package

logger = logging.getLogger(__name__)


def validate_all(validations: Iterable[Callable[[], ValidationResult]]) -> AggregateResult:
    """Runs every validation and merges the results.

    Every callable is invoked exactly once, in order, even after an earlier
    one has failed, so that all error messages can be shown together.

    Args:
        validations (Iterable[Callable[[], ValidationResult]]): Zero-argument
            callables, each running one validator.

    Returns:
        AggregateResult: Valid only if every result is valid, with the
        non-empty error messages in call order.
    """
    results = [validation() for validation in validations]
    is_valid = all(result.is_valid for result in results)
    error_messages = [result.error_message for result in results if result.error_message != ""]
    logger.debug(f"Ran {len(results)} validation(s), {len(error_messages)} failed")

    return AggregateResult(is_valid=is_valid, error_messages=error_messages)


@lru_cache(maxsize=None)
def _discover() -> tuple:
    validators = []
    path = validators_package.__path__

    for _, name, _ in pkgutil.iter_modules(path):
        try:
            module = __import__(f"{validators_package.__name__}.{name}", fromlist=["*"])
        except ImportError as e:
            logger.warning(f"Could not import validator module {name}: {e}")
            continue
        for _, item in inspect.getmembers(module, inspect.isclass):
            if issubclass(item, BaseValidator) and item is not BaseValidator and item.__module__ == module.__name__:
                validators.append(item)
    return tuple(validators)


def discover_validators() -> List[Type[BaseValidator]]:
    """Returns every `BaseValidator` subclass defined in `formcheck.validators`.

    Each module of the package is imported and scanned for classes defined
    in it. A module that fails to import is logged and skipped. The scan
    runs once per process.

    Returns:
        List[Type[BaseValidator]]: The validator classes, in module order.
    """
    return list(_discover())


def validator_registry() -> Dict[str, Type[BaseValidator]]:
    """Maps each field type to the validator class that handles it."""
    return {validator.field_type: validator for validator in discover_validators()}


def get_validator(field_type: str) -> Type[BaseValidator]:
    """Looks up the validator class for a form field type.

    Args:
        field_type (str): A field type such as "email" or "password".

    Returns:
        Type[BaseValidator]: The matching validator class.

    Raises:
        UnknownFieldTypeError: If no validator handles `field_type`.
    """
    registry = validator_registry()
    try:
        return registry[field_type]
    except KeyError:
        raise UnknownFieldTypeError(field_type) from None
