from __future__ import annotations

import pytest

from schema_annotator.kinds import FORMAT_OPTIONS, SCHEMA_TYPES, detect_kind, format_choices


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([], "array"),
        ([1, {"a": 1}], "array"),
        (None, "null"),
        ({}, "object"),
        ({"a": 1}, "object"),
        ("hello", "string"),
        ("", "string"),
        (0, "number"),
        (36, "number"),
        (1.5, "number"),
        (True, "boolean"),
        (False, "boolean"),
    ],
)
def test_detect_kind(value, expected) -> None:
    assert detect_kind(value) == expected


def test_detect_kind_never_reports_integer() -> None:
    assert detect_kind(10) == "number"


def test_format_options_start_with_none() -> None:
    for field_type in SCHEMA_TYPES:
        assert FORMAT_OPTIONS[field_type][0] == "none"


def test_format_choices() -> None:
    assert format_choices("integer") == ["none", "int32", "int64"]
    assert format_choices("number") == ["none", "float", "double"]
    assert format_choices("boolean") == ["none"]
    assert "uuid" in format_choices("string")
    assert format_choices("array") == ["none"]


def test_format_choices_returns_a_copy() -> None:
    choices = format_choices("string")
    choices.append("bogus")
    assert "bogus" not in FORMAT_OPTIONS["string"]
