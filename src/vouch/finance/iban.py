"""
IBAN validation (ISO 13616) using the official mod 97-10 algorithm.

Steps:
  1) Strip whitespace and uppercase.
  2) Check the shape: 2-letter country code + 2 check digits + alphanumeric BBAN.
  3) Check the total length against the country's registered length.
  4) Move the first 4 chars to the end.
  5) Replace letters A..Z with 10..35.
  6) Interpret the result as a big integer and compute mod 97.
  7) A valid IBAN yields remainder 1.

    validate_iban("GB82 WEST 1234 5698 7654 32")
    -> ValidationResult(is_valid=True, normalized_value="GB82WEST12345698765432")
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import convert_letters_to_numbers, is_empty, sanitize_alphanumeric

# Registered IBAN length per country code.
IBAN_LENGTHS: Mapping[str, int] = MappingProxyType({
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20, "BE": 16, "BG": 22,
    "BH": 22, "BR": 29, "BY": 28, "CH": 21, "CR": 22, "CY": 28, "CZ": 24, "DE": 22,
    "DK": 18, "DO": 28, "EE": 20, "EG": 29, "ES": 24, "FI": 18, "FO": 18, "FR": 27,
    "GB": 22, "GE": 22, "GI": 23, "GL": 18, "GR": 27, "GT": 28, "HR": 21, "HU": 28,
    "IE": 22, "IL": 23, "IQ": 23, "IS": 26, "IT": 27, "JO": 30, "KW": 30, "KZ": 20,
    "LB": 28, "LC": 32, "LI": 21, "LT": 20, "LU": 20, "LV": 21, "MC": 27, "MD": 24,
    "ME": 22, "MK": 19, "MR": 27, "MT": 31, "MU": 30, "NL": 18, "NO": 15, "PK": 24,
    "PL": 28, "PS": 29, "PT": 25, "QA": 29, "RO": 24, "RS": 22, "SA": 24, "SC": 31,
    "SE": 24, "SI": 19, "SK": 24, "SM": 27, "ST": 25, "SV": 28, "TL": 23, "TN": 24,
    "TR": 26, "UA": 29, "VA": 22, "VG": 24, "XK": 20,
})

IBAN_FORMAT_RE = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]+$")


def rearrange(iban: str) -> str:
    """Rotate the country code and check digits to the end."""
    return iban[4:] + iban[:4]


def mod97(digits: str) -> int:
    """
    Remainder of a decimal digit string modulo 97.

    Computed in chunks, carrying the remainder forward, so only small integers
    are ever materialized.
    """
    if not digits.isdigit():
        raise ValueError(f"not a digit string: {digits!r}")
    rem = 0
    for i in range(0, len(digits), 9):
        rem = int(str(rem) + digits[i : i + 9]) % 97
    return rem


@guarded
def validate_iban(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("IBAN is required", custom)

    iban = sanitize_alphanumeric(value)

    if not IBAN_FORMAT_RE.match(iban):
        return ValidationResult.fail(
            "Invalid IBAN format. Expected: 2-letter country code + 2 check digits + BBAN",
            custom,
        )

    country = iban[:2]
    expected = IBAN_LENGTHS.get(country)
    if expected is None:
        return ValidationResult.fail(f"Unknown IBAN country code: {country}", custom)

    if len(iban) != expected:
        return ValidationResult.fail(
            f"Invalid IBAN length for {country}. Expected {expected} characters, got {len(iban)}",
            custom,
        )

    try:
        remainder = mod97(convert_letters_to_numbers(rearrange(iban)))
    except ValueError:
        return ValidationResult.fail("Invalid IBAN format", custom)

    if remainder != 1:
        return ValidationResult.fail("Invalid IBAN checksum", custom)

    return ValidationResult.ok(iban)
