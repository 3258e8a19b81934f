"""
URL validator.

Two checks must both pass:
  1) an absolute-URL parse (pydantic's `AnyUrl`), with `https://` prefixed when
     the value carries no scheme separator;
  2) a stricter pattern: optional http/https/ftp scheme, a host that is a dotted
     domain with an alphabetic TLD, `localhost` or a dotted-quad IPv4, then an
     optional port and path.

The parse rejects malformed authorities (bad ports, empty hosts); the pattern
rejects hosts the parser tolerates (bare words, IPv6 literals, odd schemes).
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import is_empty, to_text

URL_RE = re.compile(
    r"^(?:(?:https?|ftp)://)?"
    r"(?:(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}"
    r"|localhost"
    r"|\d{1,3}(?:\.\d{1,3}){3})"
    r"(?::\d+)?"
    r"(?:/\S*)?$"
)

MAX_URL_LENGTH = 2048

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _parses_as_absolute_url(url: str) -> bool:
    candidate = url if "://" in url else f"https://{url}"
    try:
        _URL_ADAPTER.validate_python(candidate)
    except ValidationError:
        return False
    return True


@guarded
def validate_url(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("URL is required", custom)

    url = to_text(value).strip()

    if len(url) > MAX_URL_LENGTH:
        return ValidationResult.fail(
            f"URL is too long (max {MAX_URL_LENGTH} characters)", custom
        )

    if not _parses_as_absolute_url(url) or not URL_RE.match(url):
        return ValidationResult.fail("Invalid URL format", custom)

    return ValidationResult.ok(url)
