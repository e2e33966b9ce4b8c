from schema_annotator.exceptions import (
    AnnotationError,
    DocumentParseError,
    PackageError,
    SettingsError,
)


def test_root_exception_hierarchy() -> None:
    assert issubclass(SettingsError, PackageError)
    assert issubclass(DocumentParseError, PackageError)
    assert issubclass(AnnotationError, PackageError)


def test_exception_messages() -> None:
    assert str(DocumentParseError()) == "Invalid JSON data"
    assert str(DocumentParseError(exc=ValueError("bad"))) == "Invalid JSON data: bad"
    assert str(AnnotationError(path="age", message="nope")) == "Invalid annotation for 'age': nope"
