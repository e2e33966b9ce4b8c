from __future__ import annotations

import json
import os
from typing import Any

from .exceptions import DocumentParseError


def _decode(content: bytes) -> str:
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise DocumentParseError(exc=exc) from exc


def parse_json_text(text: Any) -> Any:
    """Decode JSON text, raising DocumentParseError on malformed input."""
    if isinstance(text, bytes):
        text = _decode(text)
    if text is None or not str(text).strip():
        raise DocumentParseError(message="No JSON data provided")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(exc=exc) from exc


def read_json_text(file_obj) -> str:
    """Read raw text from an uploaded file object or a file path."""
    if file_obj is None:
        raise DocumentParseError(message="No file uploaded")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = _decode(content)
        return content

    if isinstance(file_obj, (str, os.PathLike)):
        path = file_obj
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return _decode(f.read())


def read_json_content(file_obj) -> Any:
    """Read and decode JSON content from an uploaded file or file path."""
    return parse_json_text(read_json_text(file_obj))
