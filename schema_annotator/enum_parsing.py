"""Turn the free-text enum box into typed enum literals."""
from __future__ import annotations

import math
import re
from typing import Any, List, Optional, Union

EnumLiteral = Union[str, int, float, bool]

_INTEGER_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NUMERIC_TYPES = ("number", "integer")


def coerce_number(token: str) -> Union[str, int, float]:
    """Parse a decimal literal, keeping the token as-is when it is not one.

    Integral values come back as int so they render without a trailing ".0".
    """
    if _INTEGER_RE.fullmatch(token):
        return int(token)
    if not _DECIMAL_RE.fullmatch(token):
        return token
    value = float(token)
    if not math.isfinite(value):
        return token
    if value.is_integer():
        return int(value)
    return value


def coerce_boolean(token: str) -> Union[str, bool]:
    lowered = token.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return token


def coerce_enum_token(token: str, field_type: Optional[str]) -> EnumLiteral:
    if field_type in NUMERIC_TYPES:
        return coerce_number(token)
    if field_type == "boolean":
        return coerce_boolean(token)
    return token


def parse_enum_text(text: Any, field_type: Optional[str] = None) -> List[EnumLiteral]:
    """Split comma-separated enum text into literals typed for `field_type`.

    Tokens are trimmed and empty ones dropped. Tokens that do not coerce are
    kept as strings, e.g. "1, 2, x" as number gives [1, 2, "x"].
    """
    if text is None:
        return []
    if not isinstance(text, str):
        text = str(text)

    tokens = [t.strip() for t in text.split(",")]
    return [coerce_enum_token(t, field_type) for t in tokens if t]
