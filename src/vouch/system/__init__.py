"""System identifier validators."""

from .filename import RESERVED_NAMES, validate_file_name

__all__ = ["RESERVED_NAMES", "validate_file_name"]
