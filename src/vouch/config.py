from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Dates may arrive as objects, ISO strings or POSIX timestamps.
DateLike = Union[datetime, date, str, int, float]
Number = Union[int, float]


class _Options(BaseModel):
    # Accept both snake_case and the camelCase keys front-ends already send.
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---- Decimal precision bounds ----
class DecimalConfig(_Options):
    min: Optional[int] = None
    max: Optional[int] = None


# ---- Per-call options ----
class ValidationConfig(_Options):
    """
    Immutable options record passed alongside a value.

    Every field is optional and only read by the validators it applies to;
    e.g. `min`/`max` bound a number for `numeric` and an age for `age`.
    """
    min: Optional[Number] = None
    max: Optional[Number] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    fix_length: Optional[int] = None
    decimals: Optional[DecimalConfig] = None
    allow_special_chars: Optional[bool] = None
    accepted_file_extensions: Optional[Tuple[str, ...]] = None
    custom_error_message: Optional[str] = None
    birth_date: Optional[DateLike] = None
    min_date: Optional[DateLike] = None
    max_date: Optional[DateLike] = None
    reference_date: Optional[DateLike] = None  # "now" for age checks


DEFAULT_CONFIG = ValidationConfig()


def as_config(config: Union[ValidationConfig, Mapping[str, Any], None]) -> ValidationConfig:
    """Coerce None / a plain mapping / a ValidationConfig into a ValidationConfig."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, ValidationConfig):
        return config
    if isinstance(config, Mapping):
        config = dict(config)
    # anything else is rejected by pydantic as a ValidationError
    return ValidationConfig.model_validate(config)


# ---- Loader ----
def load_config(path: Optional[Path]) -> ValidationConfig:
    if not path:
        return ValidationConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ValidationConfig(**data)
