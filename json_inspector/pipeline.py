"""Entry points that chain validate -> parse -> format / minify / analyze.

Text inputs are parsed first; a parse failure raises `InvalidJsonError`
("Invalid JSON: ..."). Already-parsed trees skip straight to the stage.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .analyzer import JsonStats, analyze_tree
from .config import MAX_INPUT_BYTES
from .errors import InvalidJsonError
from .formatter import FormatOptions, format_tree, minify_tree
from .parser import parse
from .performance import utf8_length
from .validator import validate  # noqa: F401  re-exported
from .value_distribution import TOP_N
from .values import JsonKind, kind_of

logger = logging.getLogger(__name__)

VIEWS = ('formatted', 'minified', 'stats')
PREVIEW_LENGTH = 1000

SAMPLE_JSON = """{
    "name": "John Doe",
    "age": 30,
    "email": "john@example.com",
    "address": {
        "street": "123 Main St",
        "city": "New York",
        "zipCode": "10001"
    },
    "hobbies": ["reading", "coding", "traveling"],
    "isActive": true
}"""

Source = Any


def _tree_from(source: Source) -> Any:
    # A bare str is treated as source text; wrap a parsed string value in a
    # list or use the *_tree functions to format it as a JSON string.
    if isinstance(source, str):
        result = parse(source)
        if not result.ok:
            raise InvalidJsonError(result.error)
        return result.value
    return source


def format_json(source: Source, options: Optional[FormatOptions] = None) -> str:
    return format_tree(_tree_from(source), options or FormatOptions())


def minify_json(source: Source) -> str:
    return minify_tree(_tree_from(source))


def analyze_json(source: Source, top_values: int = TOP_N) -> JsonStats:
    return analyze_tree(_tree_from(source), top_values=top_values)


def is_too_large(text: str, max_bytes: int = MAX_INPUT_BYTES) -> bool:
    return utf8_length(text or '') > max_bytes


def process(text: str, view: str = 'formatted', options: Optional[FormatOptions] = None,
            top_values: int = TOP_N) -> str:
    """Render one of the UI views for raw text."""
    if view not in VIEWS:
        raise ValueError(f"Unknown view '{view}'. Expected one of: {', '.join(VIEWS)}")

    tree = _tree_from(text)
    logger.debug("Rendering %s view for %d characters", view, len(text))
    if view == 'formatted':
        return format_tree(tree, options or FormatOptions())
    if view == 'minified':
        return minify_tree(tree)
    stats = analyze_tree(tree, top_values=top_values)
    return json.dumps(stats.to_dict(), indent=2, ensure_ascii=False)


def _count_keys(data: Any) -> int:
    kind = kind_of(data)
    if kind is JsonKind.OBJECT:
        return sum(1 + _count_keys(v) for v in data.values())
    if kind is JsonKind.ARRAY:
        return sum(_count_keys(item) for item in data)
    return 0


def _count_values(data: Any) -> int:
    kind = kind_of(data)
    if kind is JsonKind.OBJECT:
        return sum(_count_values(v) for v in data.values())
    if kind is JsonKind.ARRAY:
        return sum(_count_values(item) for item in data)
    return 1


def _max_depth(data: Any, current: int = 0) -> int:
    # Edges walked to the deepest value; unlike compute_depth an empty container adds nothing.
    kind = kind_of(data)
    if kind is JsonKind.OBJECT:
        return max((_max_depth(v, current + 1) for v in data.values()), default=current)
    if kind is JsonKind.ARRAY:
        return max((_max_depth(item, current + 1) for item in data), default=current)
    return current


def quick_stats(text: str) -> Dict[str, int]:
    """Cheap summary for the formatter's stats view. Never raises on bad input."""
    text = text or ''
    stats = {'size': len(text), 'lines': len(text.split('\n')), 'depth': 0, 'keys': 0, 'values': 0}
    result = parse(text)
    if result.ok:
        stats['depth'] = _max_depth(result.value)
        stats['keys'] = _count_keys(result.value)
        stats['values'] = _count_values(result.value)
    return stats


def generate_preview(text: str, max_length: int = PREVIEW_LENGTH) -> str:
    if len(text) <= max_length:
        return text

    result = parse(text)
    if not result.ok:
        return text[:max_length - 3] + '...'

    preview = format_tree(result.value, FormatOptions(indent_size=2))
    if len(preview) <= max_length:
        return preview
    return preview[:max_length - 3] + '...'


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} bytes"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def describe_size(text: str) -> Dict[str, Any]:
    text = text or ''
    size = len(text)
    return {'size': size, 'size_formatted': format_size(size), 'lines': len(text.split('\n'))}
