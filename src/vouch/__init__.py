"""vouch: deterministic validators for common, financial, logistics and system inputs."""

from .common import (
    validate_age,
    validate_alpha,
    validate_alphanumeric,
    validate_birth_date,
    validate_date,
    validate_email,
    validate_numeric,
    validate_phone,
    validate_text,
    validate_url,
)
from .config import DecimalConfig, ValidationConfig, load_config
from .dispatch import supported_types, validate_input
from .finance import validate_iban, validate_isin
from .logistics import validate_gln, validate_gtin, validate_sscc
from .system import validate_file_name
from .types import InputType, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InputType",
    "ValidationResult",
    "ValidationConfig",
    "DecimalConfig",
    "load_config",
    "validate_input",
    "supported_types",
    # Finance
    "validate_iban",
    "validate_isin",
    # Logistics
    "validate_gln",
    "validate_gtin",
    "validate_sscc",
    # Common
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
    # System
    "validate_file_name",
]
