"""Per-path user overrides layered onto the inferred schema.

An `AnnotationTable` belongs to one input document. When the document
changes a new table is created instead of clearing the old one, so paths
from a previous document can never leak into the next schema.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .enum_parsing import EnumLiteral, parse_enum_text
from .exceptions import AnnotationError
from .kinds import DEFAULT_FIELD_TYPE, FORMAT_OPTIONS, NO_FORMAT, SCHEMA_TYPES
from .paths import iter_fields


class AnnotationTable(BaseModel):
    """Required flags, explicit types, formats and enums keyed by field path.

    `required_fields` is ordered by when each path was switched on; that
    order is what ends up in the schema's `required` lists.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    required_fields: List[str] = Field(default_factory=list)
    field_types: Dict[str, str] = Field(default_factory=dict)
    field_formats: Dict[str, str] = Field(default_factory=dict)
    field_enums: Dict[str, List[EnumLiteral]] = Field(default_factory=dict)

    @field_validator("required_fields")
    @classmethod
    def _dedupe_required(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))

    @field_validator("field_types")
    @classmethod
    def _check_types(cls, value: Dict[str, str]) -> Dict[str, str]:
        for path, field_type in value.items():
            if field_type not in SCHEMA_TYPES:
                raise ValueError(f"unsupported type '{field_type}' for '{path}'")
        return value

    @field_validator("field_formats")
    @classmethod
    def _drop_empty_formats(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {path: fmt for path, fmt in value.items() if fmt and fmt != NO_FORMAT}

    @field_validator("field_enums")
    @classmethod
    def _drop_empty_enums(cls, value: Dict[str, List[EnumLiteral]]) -> Dict[str, List[EnumLiteral]]:
        return {path: values for path, values in value.items() if values}

    @model_validator(mode="after")
    def _check_formats_match_types(self) -> "AnnotationTable":
        for path, fmt in self.field_formats.items():
            field_type = self.field_types.get(path) or DEFAULT_FIELD_TYPE
            if fmt not in FORMAT_OPTIONS.get(field_type, [NO_FORMAT]):
                raise ValueError(f"format '{fmt}' is not valid for type '{field_type}' at '{path}'")
        return self

    # --- reads ---

    def is_required(self, path: str) -> bool:
        return path in self.required_fields

    def type_for(self, path: str) -> Optional[str]:
        return self.field_types.get(path)

    def format_for(self, path: str) -> Optional[str]:
        return self.field_formats.get(path) or None

    def enum_for(self, path: str) -> Optional[List[EnumLiteral]]:
        return self.field_enums.get(path) or None

    # --- writes ---

    def toggle_required(self, path: str, on: bool = True) -> None:
        """Mark or unmark a path as required.

        A path that is already required keeps its original position.
        """
        if on:
            if path not in self.required_fields:
                self.required_fields.append(path)
        elif path in self.required_fields:
            self.required_fields.remove(path)

    def set_type(self, path: str, field_type: str) -> None:
        """Override the inferred type of a path and reset its format."""
        if field_type not in SCHEMA_TYPES:
            raise AnnotationError(path=path, message=f"unsupported type '{field_type}'")
        self.field_types[path] = field_type
        self.field_formats.pop(path, None)

    def set_format(self, path: str, value: Optional[str], field_type: Optional[str] = None) -> None:
        """Set or clear the format of a path.

        The format must be legal for the path's explicit type, else for
        `field_type`, else for "string" (the type a fresh form row shows).
        """
        if not value or value == NO_FORMAT:
            self.field_formats.pop(path, None)
            return

        effective_type = self.field_types.get(path) or field_type or DEFAULT_FIELD_TYPE
        allowed = FORMAT_OPTIONS.get(effective_type, [NO_FORMAT])
        if value not in allowed:
            raise AnnotationError(
                path=path,
                message=f"format '{value}' is not valid for type '{effective_type}' (expected one of: {', '.join(allowed)})",
            )
        self.field_formats[path] = value

    def set_enum(self, path: str, text: Optional[str], field_type: Optional[str] = None) -> List[EnumLiteral]:
        """Parse enum text for a path; an empty result removes the entry."""
        values = parse_enum_text(text, self.field_types.get(path) or field_type)
        if values:
            self.field_enums[path] = values
        else:
            self.field_enums.pop(path, None)
        return values

    # --- interchange ---

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "required": list(self.required_fields),
            "types": dict(self.field_types),
            "formats": dict(self.field_formats),
            "enums": {path: list(values) for path, values in self.field_enums.items()},
        }

    @classmethod
    def from_mapping(cls, data: Any) -> "AnnotationTable":
        """Build a table from the {required, types, formats, enums} layout.

        Enum entries may be given as a list of literals or as the raw
        comma-separated text typed into the form.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise AnnotationError(path="(root)", message="annotations must be a JSON object")

        types = data.get("types") or {}
        enums: Dict[str, Any] = {}
        for path, raw in (data.get("enums") or {}).items():
            if isinstance(raw, str):
                enums[path] = parse_enum_text(raw, types.get(path) if isinstance(types, dict) else None)
            else:
                enums[path] = raw

        try:
            return cls(
                required_fields=data.get("required") or [],
                field_types=types,
                field_formats=data.get("formats") or {},
                field_enums=enums,
            )
        except ValidationError as exc:
            raise AnnotationError(path="(root)", message=str(exc)) from exc


def load_annotations(path: Union[str, Path]) -> AnnotationTable:
    """Read an annotations JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise AnnotationError(path="(root)", message=f"annotations file is not valid JSON: {exc}") from exc
    return AnnotationTable.from_mapping(data)


def seed_object_types(table: AnnotationTable, document: Any) -> AnnotationTable:
    """Mark every nested-object field as type "object".

    Object rows in the form get no type control, so their type is fixed here
    when the form is generated.
    """
    for path, _key, value, _depth in iter_fields(document):
        if isinstance(value, dict):
            table.set_type(path, "object")
    return table
