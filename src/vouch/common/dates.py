"""
Date, birth-date and age validators.

Inputs may be `date`/`datetime` objects, ISO 8601 strings or POSIX timestamps.
"Now" is `config.reference_date` when given, otherwise the current UTC time, so
callers that need fully reproducible results pin it explicitly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import calculate_age, format_date, is_empty, parse_to_date, utc_now

MAX_AGE_YEARS = 130


def _reference_now(config: ValidationConfig) -> datetime:
    if config.reference_date is not None:
        ref = parse_to_date(config.reference_date)
        if ref is not None:
            return ref
    return utc_now()


@guarded
def validate_date(value: Any, config: ValidationConfig) -> ValidationResult:
    """
    Validate a real calendar date, optionally within `min_date`/`max_date`.

    Bounds are inclusive and ignored when they cannot be parsed themselves.
    The normalized value is the ISO 8601 form of the parsed date.
    """
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Date is required", custom)

    parsed = parse_to_date(value)
    if parsed is None:
        return ValidationResult.fail("Invalid date format", custom)

    if config.min_date is not None:
        lower = parse_to_date(config.min_date)
        if lower is not None and parsed < lower:
            return ValidationResult.fail(
                f"Date must be on or after {lower.date().isoformat()}", custom
            )

    if config.max_date is not None:
        upper = parse_to_date(config.max_date)
        if upper is not None and parsed > upper:
            return ValidationResult.fail(
                f"Date must be on or before {upper.date().isoformat()}", custom
            )

    return ValidationResult.ok(format_date(parsed))


@guarded
def validate_birth_date(value: Any, config: ValidationConfig) -> ValidationResult:
    """A date that is not in the future and at most 130 years back."""
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Birth date is required", custom)

    parsed = parse_to_date(value)
    if parsed is None:
        return ValidationResult.fail("Invalid date format", custom)

    now = _reference_now(config)
    if parsed > now:
        return ValidationResult.fail("Birth date cannot be in the future", custom)
    if calculate_age(parsed, now) > MAX_AGE_YEARS:
        return ValidationResult.fail(
            f"Birth date is too far in the past (max {MAX_AGE_YEARS} years)", custom
        )

    return ValidationResult.ok(format_date(parsed))


@guarded
def validate_age(value: Any, config: ValidationConfig) -> ValidationResult:
    """
    Validate the age derived from a birth date.

    The birth date is `config.birth_date` when set, otherwise `value`. The age
    must fall in 0..130 and, when configured, within `min`/`max`. The normalized
    value is the age in whole years.
    """
    custom = config.custom_error_message
    birth_value = config.birth_date if config.birth_date is not None else value

    if is_empty(birth_value):
        return ValidationResult.fail("Birth date is required to calculate age", custom)

    birth = parse_to_date(birth_value)
    if birth is None:
        return ValidationResult.fail("Invalid birth date format", custom)

    now = _reference_now(config)
    if birth > now:
        return ValidationResult.fail("Birth date cannot be in the future", custom)

    age = calculate_age(birth, now)
    if age < 0:
        return ValidationResult.fail("Invalid age (negative)", custom)
    if age > MAX_AGE_YEARS:
        return ValidationResult.fail(
            f"Invalid age (exceeds {MAX_AGE_YEARS} years)", custom
        )

    if config.min is not None and age < config.min:
        return ValidationResult.fail(f"Age must be at least {config.min}", custom)
    if config.max is not None and age > config.max:
        return ValidationResult.fail(f"Age must be at most {config.max}", custom)

    return ValidationResult.ok(age)
