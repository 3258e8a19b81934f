"""
Cross-platform file name validator.

Rejects, in order: empty names, names over `max_length` (default 255) or under
`min_length`, Windows-forbidden characters, ASCII control characters, a trailing
space or dot, Windows reserved device names (CON, PRN, ..., LPT9, compared
case-insensitively on the part before the first dot) and, when
`accepted_file_extensions` is configured, any other extension.
"""

from __future__ import annotations

import re
from typing import Any, List

from ..config import ValidationConfig
from ..guard import guarded
from ..types import ValidationResult
from ..utils import is_empty, to_text

FORBIDDEN_CHARS_RE = re.compile(r'[<>:"/\\|?*]')
CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f]")

RESERVED_NAMES: frozenset[str] = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

DEFAULT_MAX_LENGTH = 255


def _normalize_extensions(extensions: tuple[str, ...]) -> List[str]:
    out = []
    for ext in extensions:
        ext = ext.lower()
        out.append(ext if ext.startswith(".") else f".{ext}")
    return out


@guarded
def validate_file_name(value: Any, config: ValidationConfig) -> ValidationResult:
    custom = config.custom_error_message

    if is_empty(value):
        return ValidationResult.fail("File name is required", custom)

    name = to_text(value).strip()
    if not name:
        return ValidationResult.fail(
            "File name cannot be empty or only whitespace", custom
        )

    max_length = config.max_length if config.max_length is not None else DEFAULT_MAX_LENGTH
    if len(name) > max_length:
        return ValidationResult.fail(
            f"File name too long (max {max_length} characters)", custom
        )
    if config.min_length is not None and len(name) < config.min_length:
        return ValidationResult.fail(
            f"File name too short (min {config.min_length} characters)", custom
        )

    forbidden = FORBIDDEN_CHARS_RE.search(name)
    if forbidden:
        return ValidationResult.fail(
            f"File name contains forbidden character: {forbidden.group(0)}", custom
        )
    if CONTROL_CHARS_RE.search(name):
        return ValidationResult.fail("File name contains control characters", custom)

    if name.endswith((" ", ".")):
        return ValidationResult.fail("File name cannot end with a space or dot", custom)

    stem = name.split(".", 1)[0]
    if stem.upper() in RESERVED_NAMES:
        return ValidationResult.fail(f"File name uses reserved Windows name: {stem}", custom)

    if config.accepted_file_extensions:
        dot = name.rfind(".")
        extension = name[dot:].lower() if dot != -1 else ""
        accepted = _normalize_extensions(config.accepted_file_extensions)
        if extension not in accepted:
            return ValidationResult.fail(
                f"File extension not allowed. Accepted: {', '.join(accepted)}", custom
            )

    return ValidationResult.ok(name)
