from __future__ import annotations

from schema_annotator.fields import describe_fields


def test_describe_fields(ada_document) -> None:
    rows = describe_fields({**ada_document, "empty": {}, "tags": []})

    assert [row.path for row in rows] == ["name", "age", "address", "address.city", "empty", "tags"]

    address = rows[2]
    assert address.is_object
    assert address.has_children
    assert address.format_choices == []
    assert not address.editable

    city = rows[3]
    assert city.parent == "address"
    assert city.depth == 1
    assert city.kind == "string"
    assert city.editable
    assert city.format_choices[0] == "none"
    assert "email" in city.format_choices

    empty = rows[4]
    assert empty.is_object
    assert not empty.has_children

    assert rows[1].kind == "number"
    assert rows[5].kind == "array"
    assert rows[0].parent == ""


def test_describe_fields_with_dotted_parent() -> None:
    rows = describe_fields({"a.b": {"c": 1}})

    assert rows[1].path == "a.b.c"
    assert rows[1].parent == "a.b"


def test_describe_fields_of_scalar_document() -> None:
    assert describe_fields(42) == []
