"""
Shared request/response shapes every validator honors.

What lives here
---------------
- `InputType`: the closed set of tags the dispatcher understands.
- `ValidationResult`: the single result record returned by every validator.
- `Validator`: the callable signature `(value, config=None) -> ValidationResult`.

A result is either a success (optionally carrying a normalized value) or a
failure with a non-empty message. Both shapes are built through the
`ok()` / `fail()` constructors so the invariant is checked in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

if TYPE_CHECKING:
    from .config import ValidationConfig

class InputType(str, Enum):
    numeric = "numeric"
    text = "text"
    email = "email"
    url = "url"
    phone = "phone"
    iban = "iban"
    isin = "isin"
    gln = "gln"
    gtin = "gtin"
    date = "date"
    age = "age"
    file_name = "fileName"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single validation call.

    Attributes:
        is_valid: Whether the input passed every rule.
        error_message: Human-readable reason for the first failing rule.
        normalized_value: Canonical form of a valid input (type depends on the
            validator: number for numeric/age, string for everything else).
    """
    is_valid: bool
    error_message: Optional[str] = None
    normalized_value: Any = None

    def __post_init__(self) -> None:
        if self.is_valid and self.error_message is not None:
            raise ValueError("a valid result cannot carry an error message")
        if not self.is_valid and not self.error_message:
            raise ValueError("a failed result needs a non-empty error message")

    @classmethod
    def ok(cls, normalized_value: Any = None) -> "ValidationResult":
        return cls(is_valid=True, normalized_value=normalized_value)

    @classmethod
    def fail(cls, message: str, custom_message: Optional[str] = None) -> "ValidationResult":
        """
        Build a failure. A non-empty `custom_message` replaces `message` whole.
        """
        return cls(is_valid=False, error_message=custom_message or message)

    def to_dict(self) -> Dict[str, Any]:
        if not self.is_valid:
            return {"is_valid": False, "error_message": self.error_message}
        out: Dict[str, Any] = {"is_valid": True}
        if self.normalized_value is not None:
            out["normalized_value"] = self.normalized_value
        return out


Validator = Callable[..., ValidationResult]
ConfigLike = Union["ValidationConfig", Dict[str, Any], None]
