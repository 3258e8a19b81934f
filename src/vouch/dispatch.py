"""
Master dispatch: route an `InputType` tag to its validator.

Callers depend only on `InputType` and `ValidationResult`; this module is the
single place that knows which function handles which tag.

    validate_input("GB82WEST12345698765432", InputType.iban)
    validate_input(99.99, "numeric", {"min": 0, "max": 100})
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, List, Mapping, Union

import structlog

from .common import (
    validate_age,
    validate_date,
    validate_email,
    validate_numeric,
    validate_phone,
    validate_text,
    validate_url,
)
from .config import ValidationConfig, as_config
from .finance import validate_iban, validate_isin
from .logistics import validate_gln, validate_gtin
from .system import validate_file_name
from .types import ConfigLike, InputType, ValidationResult, Validator

log = structlog.get_logger(__name__)

# Map each tag to exactly one validator.
VALIDATORS: Mapping[InputType, Validator] = MappingProxyType({
    # Finance
    InputType.iban: validate_iban,
    InputType.isin: validate_isin,
    # Logistics
    InputType.gln: validate_gln,
    InputType.gtin: validate_gtin,
    # Common
    InputType.numeric: validate_numeric,
    InputType.text: validate_text,
    InputType.email: validate_email,
    InputType.url: validate_url,
    InputType.phone: validate_phone,
    InputType.date: validate_date,
    InputType.age: validate_age,
    # System
    InputType.file_name: validate_file_name,
})


def supported_types() -> List[str]:
    return [t.value for t in VALIDATORS]


def _resolve(input_type: Union[InputType, str]) -> InputType | None:
    if isinstance(input_type, InputType):
        return input_type
    try:
        return InputType(input_type)
    except ValueError:
        return None


def _unknown(input_type: Any, config: ConfigLike) -> ValidationResult:
    label = input_type.value if isinstance(input_type, InputType) else input_type
    custom = None
    try:
        custom = as_config(config).custom_error_message
    except ValueError:
        log.warning("invalid_config", validator="validate_input")
    log.debug("unknown_input_type", input_type=label)
    return ValidationResult.fail(f"Unknown input type: {label}", custom)


def validate_input(
    value: Any,
    input_type: Union[InputType, str],
    config: Union[ValidationConfig, Mapping[str, Any], None] = None,
) -> ValidationResult:
    """
    Validate `value` with the validator registered for `input_type`.

    `value` and `config` are forwarded unchanged and the validator's result is
    returned as is. An unregistered tag yields a failure result.
    """
    resolved = _resolve(input_type)
    validator = VALIDATORS.get(resolved) if resolved is not None else None
    if validator is None:
        return _unknown(input_type, config)
    return validator(value, config)
