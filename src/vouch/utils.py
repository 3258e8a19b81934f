"""
Shared helpers used by the validators.

Why this file exists
--------------------
Most validators start the same way: decide whether a value is present, coerce it
to the shape the rule needs (text, number, date), and sometimes canonicalize it
(strip separators, uppercase, turn letters into digits). Keeping those steps here
means each validator only states its own rules.

Design principles
-----------------
- **Pure functions**: no I/O, no shared state; easy to test and reason about.
- **Signals, not exceptions**: coercion failures return `nan` / `None` / `""`
  so validators can turn them into ordinary failure results.
- **Fast**: O(n) over the input string.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional

# Strict decimal grammar: optional sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_INFINITY_RE = re.compile(r"^([+-]?)(?:inf|infinity)$", re.I)
_WHITESPACE_RE = re.compile(r"\s+")


# ---- Presence & text coercion ------------------------------------------------------------

def is_empty(value: Any) -> bool:
    """Treat None and the empty string uniformly as "absent"."""
    return value is None or value == ""


def to_text(value: Any) -> str:
    """
    Coerce a value to text for string-based validators.

    Integral floats render without a trailing ".0" so `123.0` validates like "123".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


# ---- Identifier canonicalization ---------------------------------------------------------

def sanitize_alphanumeric(value: Any) -> str:
    """
    Remove every whitespace character and uppercase.

    Common first step for checksum-based identifiers, so "gb82 west 1234" and
    "GB82WEST1234" are validated identically.
    """
    if value is None:
        return ""
    return _WHITESPACE_RE.sub("", to_text(value)).upper()


def digits_only(value: str) -> str:
    """
    Return only the digit characters from a string.

    Used by the GS1 validators so inputs like "5901 2341 2345 7" normalize to
    "5901234123457".
    """
    return "".join(ch for ch in value if "0" <= ch <= "9")


def letter_to_number(ch: str) -> str:
    """
    ISO 7064 letter value: A=10, B=11, ..., Z=35 (case-insensitive).

    Any other character is returned unchanged.
    """
    if "A" <= ch <= "Z":
        return str(ord(ch) - 55)  # ord('A') == 65 -> 10
    if "a" <= ch <= "z":
        return str(ord(ch) - 87)  # ord('a') == 97 -> 10
    return ch


def convert_letters_to_numbers(s: str) -> str:
    """Replace every letter with its ISO 7064 value, leaving digits in place."""
    return "".join(letter_to_number(ch) for ch in s)


# ---- Numbers -----------------------------------------------------------------------------

def parse_to_number(value: Any) -> float:
    """
    Coerce a number or numeric string to a number.

    Thousands-separator commas are stripped first ("1,234.5" -> 1234.5).
    Returns `nan` for anything that is not numeric; callers check for it.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan

    normalized = value.strip().replace(",", "")
    if _NUMBER_RE.match(normalized):
        return float(normalized)
    inf = _INFINITY_RE.match(normalized)
    if inf:
        return -math.inf if inf.group(1) == "-" else math.inf
    return math.nan


def count_decimal_places(value: float) -> int:
    """
    Number of fractional digits in the shortest representation of `value`.

    Exponent notation adjusts the mantissa's count by the exponent
    (1.5e-07 -> 8). Integers and non-finite values yield 0.
    """
    if isinstance(value, int) or not math.isfinite(value) or float(value).is_integer():
        return 0

    text = repr(float(value)).lower()
    mantissa, _, exponent = text.partition("e")
    dot = mantissa.find(".")
    mantissa_decimals = 0 if dot == -1 else len(mantissa) - dot - 1
    return max(0, mantissa_decimals - int(exponent or 0))


# ---- Dates -------------------------------------------------------------------------------

def _naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_to_date(value: Any) -> Optional[datetime]:
    """
    Parse a datetime, date, ISO 8601 string or POSIX timestamp.

    Aware values are converted to UTC; everything is returned naive so
    comparisons never mix aware and naive datetimes. Returns None when the
    value cannot be read as a real calendar date (e.g. "2023-02-30").
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return _naive_utc(datetime.fromisoformat(value.strip()))
        except ValueError:
            return None
    return None


def calculate_age(birth_date: datetime, reference_date: Optional[datetime] = None) -> int:
    """
    Whole years between `birth_date` and `reference_date` (default: now).

    The naive year difference is decremented when the birthday has not yet
    occurred in the reference year.
    """
    ref = reference_date or utc_now()
    age = ref.year - birth_date.year
    if (ref.month, ref.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def format_date(dt: datetime) -> str:
    """ISO 8601; date-only when the time part is exactly midnight."""
    if dt.time() == time():
        return dt.date().isoformat()
    return dt.isoformat()
