from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .annotations import AnnotationTable
from .kinds import detect_kind
from .paths import join_path


def build_schema(root: Any, annotations: Optional[AnnotationTable] = None) -> Dict[str, Any]:
    """Infer a JSON Schema from `root`, applying per-path overrides.

    The result always has type "object". Neither `root` nor `annotations`
    is modified, so calling this twice with the same inputs gives equal
    output.
    """
    if annotations is None:
        annotations = AnnotationTable()
    schema: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}
    _build_level(schema, root, annotations, "")
    return schema


def _build_level(schema_node: Dict[str, Any], data: Any, annotations: AnnotationTable, prefix: str) -> None:
    if not isinstance(data, dict):
        return

    required_here = set()
    for key, value in data.items():
        field_path = join_path(prefix, key)
        field_type = annotations.type_for(field_path) or detect_kind(value)

        fragment: Dict[str, Any] = {"type": field_type}
        fmt = annotations.format_for(field_path)
        if fmt:
            fragment["format"] = fmt
        enum_values = annotations.enum_for(field_path)
        if enum_values:
            fragment["enum"] = list(enum_values)
        schema_node["properties"][str(key)] = fragment

        if annotations.is_required(field_path):
            required_here.add(field_path)

        if field_type == "object" and isinstance(value, dict):
            fragment["properties"] = {}
            fragment["required"] = []
            _build_level(fragment, value, annotations, field_path)

    # `required` follows the order paths were marked, not document order.
    keys_by_path = {join_path(prefix, key): str(key) for key in data}
    schema_node["required"].extend(
        keys_by_path[path] for path in annotations.required_fields if path in required_here
    )


def render_schema(schema: Dict[str, Any], indent: Optional[int] = 2) -> str:
    """Serialize a schema as pretty-printed JSON text."""
    return json.dumps(schema, indent=indent, ensure_ascii=False)


def generate_schema_text(root: Any, annotations: Optional[AnnotationTable] = None, indent: Optional[int] = 2) -> str:
    return render_schema(build_schema(root, annotations), indent=indent)
