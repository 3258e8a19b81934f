"""
International phone number validator (E.164 shape).

Separators (whitespace, dashes, dots, parentheses, brackets) are accepted in the
input and stripped from the normalized value:

    validate_phone("+33-1-23-45-67-89")
    -> ValidationResult(is_valid=True, normalized_value="+33123456789")
"""

from __future__ import annotations

import re
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import is_empty, to_text

_SEPARATORS_RE = re.compile(r"[\s\-.()\[\]]")
E164_RE = re.compile(r"^\+[1-9][0-9]{0,14}$")
MIN_DIGITS = 7


@guarded
def validate_phone(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Phone number is required", custom)

    raw = to_text(value).strip()
    if not raw.startswith("+"):
        return ValidationResult.fail(
            "Phone number must start with + for international format", custom
        )

    normalized = _SEPARATORS_RE.sub("", raw)
    if not E164_RE.match(normalized):
        return ValidationResult.fail(
            "Invalid phone number format. Expected: + followed by 1-15 digits", custom
        )

    if len(normalized) - 1 < MIN_DIGITS:
        return ValidationResult.fail(
            f"Phone number too short (minimum {MIN_DIGITS} digits)", custom
        )

    return ValidationResult.ok(normalized)
