"""
Email validator using a simplified RFC 5322 pattern.

    validate_email("  User@Example.COM ")
    -> ValidationResult(is_valid=True, normalized_value="user@example.com")
"""

from __future__ import annotations

import re
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import is_empty, to_text

# Local part: RFC 5322 atext plus dots. Domain: dot-separated labels of up to 63
# characters that neither start nor end with a hyphen.
EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

MAX_EMAIL_LENGTH = 254  # RFC 5321 path limit
MAX_LOCAL_PART_LENGTH = 64


@guarded
def validate_email(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Email is required", custom)

    email = to_text(value).strip().lower()

    if len(email) > MAX_EMAIL_LENGTH:
        return ValidationResult.fail(
            f"Email address is too long (max {MAX_EMAIL_LENGTH} characters)", custom
        )
    if "@" not in email:
        return ValidationResult.fail("Invalid email format: missing @ symbol", custom)
    if not EMAIL_RE.match(email):
        return ValidationResult.fail("Invalid email format", custom)

    local_part, domain = email.split("@", 1)
    if len(local_part) > MAX_LOCAL_PART_LENGTH:
        return ValidationResult.fail(
            f"Email local part too long (max {MAX_LOCAL_PART_LENGTH} characters)", custom
        )
    if "." not in domain:
        return ValidationResult.fail(
            "Invalid email domain: missing top-level domain", custom
        )

    return ValidationResult.ok(email)
