"""Financial identifier validators: IBAN (ISO 13616) and ISIN (ISO 6166)."""

from .iban import IBAN_LENGTHS, mod97, validate_iban
from .isin import luhn_sum, validate_isin

__all__ = [
    "IBAN_LENGTHS",
    "mod97",
    "luhn_sum",
    "validate_iban",
    "validate_isin",
]
