from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .kinds import DEFAULT_FIELD_TYPE, detect_kind, format_choices
from .paths import iter_fields


@dataclass(frozen=True)
class FieldRow:
    """One line of the annotation form."""

    path: str
    key: str
    parent: str
    depth: int
    kind: str
    is_object: bool
    has_children: bool
    format_choices: List[str] = field(default_factory=list)

    @property
    def editable(self) -> bool:
        """Object rows only carry a required checkbox."""
        return not self.is_object


def _parent_path(path: str, key: str, depth: int) -> str:
    return path[: -len(key) - 1] if depth else ""


def describe_fields(document: Any) -> List[FieldRow]:
    """List the form rows for a document, parents before their children."""
    rows: List[FieldRow] = []
    for path, key, value, depth in iter_fields(document):
        is_object = isinstance(value, dict)
        rows.append(
            FieldRow(
                path=path,
                key=key,
                parent=_parent_path(path, key, depth),
                depth=depth,
                kind=detect_kind(value),
                is_object=is_object,
                has_children=is_object and len(value) > 0,
                format_choices=[] if is_object else format_choices(DEFAULT_FIELD_TYPE),
            )
        )
    return rows
