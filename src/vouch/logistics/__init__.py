"""GS1 logistics identifier validators."""

from .gs1 import (
    GLN_LENGTHS,
    GTIN_LENGTHS,
    SSCC_LENGTHS,
    gs1_check_digit,
    is_valid_gs1,
    validate_gln,
    validate_gtin,
    validate_sscc,
)

__all__ = [
    "GLN_LENGTHS",
    "GTIN_LENGTHS",
    "SSCC_LENGTHS",
    "gs1_check_digit",
    "is_valid_gs1",
    "validate_gln",
    "validate_gtin",
    "validate_sscc",
]
