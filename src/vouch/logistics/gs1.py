"""
GS1 identifier validators (GLN, GTIN, SSCC) sharing one Modulo-10 check.

GS1 Modulo 10
-------------
Take the data digits (everything but the trailing check digit). From right to
left apply weights 3, 1, 3, 1, ... (the rightmost data digit gets 3), sum the
products, and the check digit is `(10 - sum % 10) % 10`.

The three identifiers differ only in their accepted lengths:
  - GLN:  13 digits
  - GTIN: 8, 12, 13 or 14 digits (EAN-8, UPC-A, EAN-13, GTIN-14)
  - SSCC: 18 digits
"""

from __future__ import annotations

from typing import AbstractSet, Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import digits_only, is_empty, sanitize_alphanumeric

GLN_LENGTHS: frozenset[int] = frozenset({13})
GTIN_LENGTHS: frozenset[int] = frozenset({8, 12, 13, 14})
SSCC_LENGTHS: frozenset[int] = frozenset({18})


def gs1_check_digit(data_digits: str) -> int:
    """Check digit for `data_digits` (all digits except the check digit)."""
    total = 0
    for i, ch in enumerate(reversed(data_digits)):
        weight = 3 if i % 2 == 0 else 1
        total += (ord(ch) - 48) * weight
    return (10 - total % 10) % 10


def is_valid_gs1(code: str, lengths: AbstractSet[int]) -> bool:
    """True when `code` is all digits, has an accepted length and a correct check digit."""
    if not code.isascii() or not code.isdigit():
        return False
    if len(code) not in lengths:
        return False
    return gs1_check_digit(code[:-1]) == int(code[-1])


def _lengths_label(lengths: AbstractSet[int]) -> str:
    ordered = [str(n) for n in sorted(lengths)]
    if len(ordered) == 1:
        return ordered[0]
    return ", ".join(ordered[:-1]) + f", or {ordered[-1]}"


def _validate_gs1(
    name: str, lengths: AbstractSet[int], value: Any, config: ValidationConfig
) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail(f"{name} is required", custom)

    code = digits_only(sanitize_alphanumeric(value))

    if len(code) not in lengths:
        return ValidationResult.fail(
            f"Invalid {name} length. Expected {_lengths_label(lengths)} digits, got {len(code)}",
            custom,
        )

    if not is_valid_gs1(code, lengths):
        return ValidationResult.fail(f"Invalid {name} check digit", custom)

    return ValidationResult.ok(code)


@guarded
def validate_gln(value: Any, config: ValidationConfig) -> ValidationResult:
    return _validate_gs1("GLN", GLN_LENGTHS, value, config)


@guarded
def validate_gtin(value: Any, config: ValidationConfig) -> ValidationResult:
    return _validate_gs1("GTIN", GTIN_LENGTHS, value, config)


@guarded
def validate_sscc(value: Any, config: ValidationConfig) -> ValidationResult:
    return _validate_gs1("SSCC", SSCC_LENGTHS, value, config)
