"""Result records returned by validators and the aggregator."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of a single validator call.

    Attributes:
        is_valid (bool): Whether the value passed validation.
        error_message (str): The reason the value failed. Empty when
            `is_valid` is True.
    """

    is_valid: bool
    error_message: str = ""

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True, "")

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": self.is_valid, "error_message": self.error_message}


@dataclass(frozen=True)
class AggregateResult:
    """The merged outcome of several validator calls.

    Attributes:
        is_valid (bool): True only if every merged result was valid.
        error_messages (List[str]): Every non-empty error message, in the
            order the validators were run.
    """

    is_valid: bool
    error_messages: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": self.is_valid, "error_messages": list(self.error_messages)}
