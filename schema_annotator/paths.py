from __future__ import annotations

from typing import Any, Iterator, Tuple


def join_path(prefix: str, key: Any, sep: str = '.') -> str:
    """Append a key to a dot path.

    Keys are joined verbatim: a key that itself contains a dot is not
    escaped, so 'a.b' under 'x' and 'b' under 'x.a' share the path 'x.a.b'.
    """
    if not isinstance(key, str):
        key = str(key)
    return f"{prefix}{sep}{key}" if prefix else key


def iter_fields(data: Any, prefix: str = '', depth: int = 0) -> Iterator[Tuple[str, str, Any, int]]:
    """Walk object fields pre-order, yielding (path, key, value, depth).

    Only dict values are descended into; lists and scalars are leaves.
    """
    if not isinstance(data, dict):
        return
    for key, value in data.items():
        path = join_path(prefix, key)
        yield path, str(key), value, depth
        if isinstance(value, dict):
            yield from iter_fields(value, path, depth + 1)
