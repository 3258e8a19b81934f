"""
Numeric validator: range and decimal-precision checks.

    validate_numeric("1,234.50", {"min": 0, "decimals": {"max": 2}})
    -> ValidationResult(is_valid=True, normalized_value=1234.5)
"""

from __future__ import annotations

import math
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import count_decimal_places, is_empty, parse_to_number


@guarded
def validate_numeric(value: Any, config: ValidationConfig) -> ValidationResult:
    """
    Validate a number or numeric string.

    Rules, in order: present, parseable, finite, `min`/`max` (inclusive),
    `decimals.min`/`decimals.max` (inclusive).
    """
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Numeric value is required", custom)

    num = parse_to_number(value)
    if math.isnan(num):
        return ValidationResult.fail("Invalid numeric value", custom)
    if math.isinf(num):
        return ValidationResult.fail("Value must be a finite number", custom)

    if config.min is not None and num < config.min:
        return ValidationResult.fail(f"Value must be at least {config.min}", custom)
    if config.max is not None and num > config.max:
        return ValidationResult.fail(f"Value must be at most {config.max}", custom)

    decimals = config.decimals
    if decimals is not None:
        places = count_decimal_places(num)
        if decimals.min is not None and places < decimals.min:
            return ValidationResult.fail(
                f"Must have at least {decimals.min} decimal places", custom
            )
        if decimals.max is not None and places > decimals.max:
            return ValidationResult.fail(
                f"Must have at most {decimals.max} decimal places", custom
            )

    return ValidationResult.ok(num)
