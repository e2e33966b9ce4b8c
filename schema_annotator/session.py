from __future__ import annotations

from typing import Any, List, Optional

from .annotations import AnnotationTable, seed_object_types
from .enum_parsing import EnumLiteral
from .fields import FieldRow, describe_fields
from .io_utils import parse_json_text
from .logging import get_logger
from .schema_builder import build_schema, render_schema

logger = get_logger(__name__)


class AnnotationSession:
    """The document being annotated plus its annotation table.

    Every write re-runs the schema build over the whole document and returns
    the new schema text. Loading a new document replaces the table.
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent
        self.text: str = ""
        self.document: Any = {}
        self.fields: List[FieldRow] = []
        self.annotations = AnnotationTable()
        self.generation = 0

    @property
    def loaded(self) -> bool:
        return self.generation > 0

    def load(self, text: str) -> str:
        """Switch to a new document.

        A parse failure raises DocumentParseError before anything is
        replaced, so the previous document, table and schema stay in effect.
        """
        document = parse_json_text(text)
        fields = describe_fields(document)
        annotations = seed_object_types(AnnotationTable(), document)

        self.text = text
        self.document = document
        self.fields = fields
        self.annotations = annotations
        self.generation += 1
        logger.info("Document loaded", field_count=len(fields))
        return self.schema_text()

    def schema(self) -> dict:
        return build_schema(self.document, self.annotations)

    def schema_text(self) -> str:
        return render_schema(self.schema(), indent=self.indent)

    def toggle_required(self, path: str, on: bool) -> str:
        self.annotations.toggle_required(path, on)
        logger.debug("Required flag changed", path=path, required=on)
        return self.schema_text()

    def set_type(self, path: str, field_type: str) -> str:
        self.annotations.set_type(path, field_type)
        logger.debug("Type changed", path=path, type=field_type)
        return self.schema_text()

    def set_format(self, path: str, value: Optional[str]) -> str:
        self.annotations.set_format(path, value)
        logger.debug("Format changed", path=path, format=value)
        return self.schema_text()

    def set_enum(self, path: str, text: Optional[str]) -> str:
        values: List[EnumLiteral] = self.annotations.set_enum(path, text)
        logger.debug("Enum changed", path=path, values=values)
        return self.schema_text()
