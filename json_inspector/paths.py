from __future__ import annotations

ROOT_PATH = ''


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Opening brackets are escaped as '\\[' so a key never reads as an index.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace('.', '\\.').replace('[', '\\[')


def key_path(parent: str, key: str) -> str:
    """Qualify an object key under its parent path (`a.b`, or `b` at the root)."""
    key = escape_path_segment(key)
    return f"{parent}.{key}" if parent else key


def index_path(parent: str, index: int) -> str:
    """Qualify an array position under its parent path (`a[2]`, or `[2]` at the root)."""
    return f"{parent}[{index}]"
