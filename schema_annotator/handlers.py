from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional

import gradio as gr

from .exceptions import PackageError
from .io_utils import read_json_text
from .kinds import format_choices, NO_FORMAT
from .logging import get_logger
from .session import AnnotationSession
from .settings import get_settings

logger = get_logger(__name__)


def ensure_session(session: Optional[AnnotationSession]) -> AnnotationSession:
    if session is None:
        session = AnnotationSession(indent=get_settings().schema_indent)
    return session


def fields_payload(session: AnnotationSession) -> Dict[str, Any]:
    """Render input for the field list; the generation forces a redraw."""
    return {
        "generation": session.generation,
        "rows": [{**asdict(row), "editable": row.editable} for row in session.fields],
    }


def load_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        text = read_json_text(file_obj)
    except (OSError, PackageError) as e:
        return gr.update(), f"Error reading file: {str(e)}"
    return text, "File loaded. Click 'Generate Fields' to build the field list."


def generate_fields_handler(text, session):
    session = ensure_session(session)
    try:
        schema_text = session.load(text)
    except PackageError as e:
        logger.warning("Invalid JSON payload", error=str(e))
        return session, gr.update(), gr.update(), f"Invalid JSON data. Please ensure the JSON format is correct. ({str(e)})"
    return session, fields_payload(session), schema_text, f"Found {len(session.fields)} fields."


def required_change_handler(path, checked, session):
    session = ensure_session(session)
    return session, session.toggle_required(path, bool(checked)), ""


def type_change_handler(path, field_type, session):
    session = ensure_session(session)
    try:
        schema_text = session.set_type(path, field_type)
    except PackageError as e:
        return session, gr.update(), gr.update(), gr.update(), str(e)

    format_update = gr.update(choices=format_choices(field_type), value=NO_FORMAT)
    enum_update = gr.update(visible=field_type != "boolean")
    return session, format_update, enum_update, schema_text, ""


def format_change_handler(path, value, session):
    session = ensure_session(session)
    try:
        schema_text = session.set_format(path, value)
    except PackageError as e:
        return session, gr.update(), str(e)
    return session, schema_text, ""


def enum_change_handler(path, text, session):
    session = ensure_session(session)
    return session, session.set_enum(path, text), ""
