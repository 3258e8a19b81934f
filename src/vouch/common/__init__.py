"""Common data validators: numbers, text, email, URL, phone, dates and ages."""

from .dates import validate_age, validate_birth_date, validate_date
from .email import validate_email
from .numeric import validate_numeric
from .phone import validate_phone
from .text import validate_alpha, validate_alphanumeric, validate_text
from .url import validate_url

__all__ = [
    "validate_numeric",
    "validate_text",
    "validate_alpha",
    "validate_alphanumeric",
    "validate_email",
    "validate_url",
    "validate_phone",
    "validate_date",
    "validate_birth_date",
    "validate_age",
]
