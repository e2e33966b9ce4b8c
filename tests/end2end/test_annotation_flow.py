from __future__ import annotations

import json

from schema_annotator.annotations import AnnotationTable
from schema_annotator.schema_builder import build_schema, render_schema
from schema_annotator.session import AnnotationSession

ADA_SCHEMA = (
    '{"type":"object","properties":{"name":{"type":"string"},'
    '"age":{"type":"integer","format":"int32"},'
    '"address":{"type":"object","properties":{"city":{"type":"string"}},"required":[]}},'
    '"required":["name"]}'
)


def test_ada_example_matches_documented_schema(ada_document) -> None:
    table = AnnotationTable()
    table.toggle_required("name", True)
    table.set_type("age", "integer")
    table.set_format("age", "int32")

    schema = build_schema(ada_document, table)

    assert render_schema(schema, indent=None).replace(", ", ",").replace(": ", ":") == ADA_SCHEMA


def test_form_session_flow(ada_document) -> None:
    session = AnnotationSession()
    session.load(json.dumps(ada_document))

    session.toggle_required("name", True)
    session.set_type("age", "integer")
    session.set_format("age", "int32")
    session.toggle_required("address.city", True)
    session.set_enum("address.city", "London, Paris")
    text = session.toggle_required("address.city", False)

    schema = json.loads(text)
    assert schema["required"] == ["name"]
    assert schema["properties"]["age"] == {"type": "integer", "format": "int32"}
    assert schema["properties"]["address"] == {
        "type": "object",
        "properties": {"city": {"type": "string", "enum": ["London", "Paris"]}},
        "required": [],
    }
    assert text.startswith('{\n  "type": "object"')


def test_changing_type_drops_format_but_keeps_enum() -> None:
    session = AnnotationSession()
    session.load('{"score": 1.5}')
    session.set_type("score", "number")
    session.set_format("score", "double")
    session.set_enum("score", "1.5, 2")

    schema = json.loads(session.set_type("score", "integer"))

    assert schema["properties"]["score"] == {"type": "integer", "enum": [1.5, 2]}
