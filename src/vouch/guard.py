"""
Boundary wrapper applied to every public validator.

Validators report expected problems as failure results. Anything else that goes
wrong inside one (a conversion error on odd input, a bad config mapping) is
logged and turned into a failure result here, so no exception crosses the
validator boundary.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import structlog
from pydantic import ValidationError

from .config import ValidationConfig, as_config
from .types import ConfigLike, ValidationResult

log = structlog.get_logger(__name__)

UNEXPECTED_ERROR = "Unable to validate value"
INVALID_CONFIG = "Invalid validation config"


def guarded(
    fn: Callable[[Any, ValidationConfig], ValidationResult],
) -> Callable[..., ValidationResult]:
    """
    Wrap `fn(value, config)` so it accepts any config shape and never raises.

    The wrapped validator always receives a `ValidationConfig`.
    """

    @functools.wraps(fn)
    def wrapper(value: Any, config: ConfigLike = None) -> ValidationResult:
        try:
            cfg = as_config(config)
        except ValidationError as exc:
            log.warning("invalid_config", validator=fn.__name__, errors=exc.error_count())
            return ValidationResult.fail(INVALID_CONFIG)

        try:
            return fn(value, cfg)
        except Exception as exc:
            log.warning("validator_error", validator=fn.__name__, error=repr(exc))
            return ValidationResult.fail(UNEXPECTED_ERROR, cfg.custom_error_message)

    return wrapper
