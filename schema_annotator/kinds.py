from __future__ import annotations

from typing import Any, Dict, List, Tuple

SCHEMA_TYPES: Tuple[str, ...] = ("string", "number", "integer", "boolean", "object")

FORMAT_OPTIONS: Dict[str, List[str]] = {
    "string": ["none", "date", "time", "date-time", "email", "hostname", "ipv4", "ipv6", "uri", "uuid"],
    "number": ["none", "float", "double"],
    "integer": ["none", "int32", "int64"],
    "boolean": ["none"],
    "object": ["none"],
}

NO_FORMAT = "none"

# Type a fresh leaf row shows before the user picks one.
DEFAULT_FIELD_TYPE = "string"


def detect_kind(value: Any) -> str:
    """Return the coarse JSON kind of a decoded value.

    Arrays and nulls get their own labels; everything else maps to the
    primitive kind. bool is checked before numbers since it subclasses int.
    """
    if isinstance(value, (list, tuple)):
        return "array"
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


def format_choices(field_type: str) -> List[str]:
    """Legal format values for a schema type, "none" first."""
    return list(FORMAT_OPTIONS.get(field_type, [NO_FORMAT]))
