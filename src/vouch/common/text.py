"""
Text validators: length bounds and character-class restrictions.

- `validate_text`         trims, then applies fix/min/max length and, when
                          `allow_special_chars` is explicitly False, limits the
                          text to letters, digits and whitespace.
- `validate_alpha`        letters and whitespace only, then the text rules.
- `validate_alphanumeric` the text rules with special characters forbidden.
"""

from __future__ import annotations

import re
from typing import Any

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import is_empty, to_text

_ALNUM_SPACE_RE = re.compile(r"^[a-zA-Z0-9\s]+$")
_ALPHA_SPACE_RE = re.compile(r"^[a-zA-Z\s]+$")


def _check_text(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Text is required", custom)

    text = to_text(value).strip()

    if config.fix_length is not None and len(text) != config.fix_length:
        return ValidationResult.fail(
            f"Text must be exactly {config.fix_length} characters", custom
        )
    if config.min_length is not None and len(text) < config.min_length:
        return ValidationResult.fail(
            f"Text must be at least {config.min_length} characters", custom
        )
    if config.max_length is not None and len(text) > config.max_length:
        return ValidationResult.fail(
            f"Text must be at most {config.max_length} characters", custom
        )

    # Only an explicit False restricts the character set; None means "allowed".
    if config.allow_special_chars is False and not _ALNUM_SPACE_RE.match(text):
        return ValidationResult.fail(
            "Text can only contain letters, numbers, and spaces", custom
        )

    return ValidationResult.ok(text)


@guarded
def validate_text(value: Any, config: ValidationConfig) -> ValidationResult:
    return _check_text(value, config)


@guarded
def validate_alpha(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("Text is required", custom)

    text = to_text(value).strip()
    if not _ALPHA_SPACE_RE.match(text):
        return ValidationResult.fail("Text can only contain letters and spaces", custom)

    return _check_text(text, config)


@guarded
def validate_alphanumeric(value: Any, config: ValidationConfig) -> ValidationResult:
    return _check_text(value, config.model_copy(update={"allow_special_chars": False}))
