"""
ISIN validation (ISO 6166): Luhn checksum over the letter-expanded code.

    validate_isin("US0378331005")
    -> ValidationResult(is_valid=True, normalized_value="US0378331005")
"""

from __future__ import annotations

import re
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import convert_letters_to_numbers, is_empty, sanitize_alphanumeric

# Country code + 9-character NSIN + check digit.
ISIN_FORMAT_RE = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}[0-9]$")


def luhn_sum(digits: str) -> int:
    """
    Luhn sum of a digit string whose last digit is the check digit.

    Digits are indexed by distance from the right (0 = check digit); those at an
    odd distance are doubled, and 9 is subtracted when the double exceeds 9.
    """
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = ord(ch) - 48  # '0' -> 48
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9  # sum of digits for doubled value (e.g., 8*2 -> 16 -> 1+6 -> 7)
        total += d
    return total


@guarded
def validate_isin(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("ISIN is required", custom)

    isin = sanitize_alphanumeric(value)

    if not ISIN_FORMAT_RE.match(isin):
        return ValidationResult.fail(
            "Invalid ISIN format. Expected: 2-letter country code + "
            "9 alphanumeric characters + 1 check digit",
            custom,
        )

    if luhn_sum(convert_letters_to_numbers(isin)) % 10 != 0:
        return ValidationResult.fail("Invalid ISIN check digit", custom)

    return ValidationResult.ok(isin)
