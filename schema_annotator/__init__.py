"""Infer a JSON Schema from a sample document and layer field annotations onto it.

The Gradio UI lives in `app.py` / `schema_annotator.ui`. The core is pure:
- detect the kind of a JSON value
- build a schema from a document plus an annotation table
- parse enum text into typed literals
"""

from schema_annotator.annotations import AnnotationTable, load_annotations, seed_object_types
from schema_annotator.enum_parsing import parse_enum_text
from schema_annotator.exceptions import AnnotationError, DocumentParseError, PackageError, SettingsError
from schema_annotator.kinds import FORMAT_OPTIONS, SCHEMA_TYPES, detect_kind
from schema_annotator.logging import configure_logging, get_logger
from schema_annotator.schema_builder import build_schema, generate_schema_text, render_schema
from schema_annotator.settings import Settings, get_settings

__version__ = "0.1.0"

logger = get_logger("schema_annotator")

__all__ = [
    "FORMAT_OPTIONS",
    "SCHEMA_TYPES",
    "AnnotationError",
    "AnnotationTable",
    "DocumentParseError",
    "PackageError",
    "Settings",
    "SettingsError",
    "__version__",
    "build_schema",
    "configure_logging",
    "detect_kind",
    "generate_schema_text",
    "get_logger",
    "get_settings",
    "load_annotations",
    "logger",
    "parse_enum_text",
    "render_schema",
    "seed_object_types",
]
