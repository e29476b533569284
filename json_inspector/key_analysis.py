from __future__ import annotations

import re
from typing import Any, Dict, List, Tuple

from .paths import index_path, key_path
from .values import JsonKind, kind_of

# Checked in order; the first match wins.
KEY_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ('camelCase', re.compile(r'^[a-z][a-z0-9]*[A-Z][a-zA-Z0-9]*$')),
    ('snake_case', re.compile(r'^[a-z][a-z0-9]*(_[a-z0-9]+)+$')),
    ('kebab-case', re.compile(r'^[a-z][a-z0-9]*(-[a-z0-9]+)+$')),
    ('PascalCase', re.compile(r'^[A-Z][a-zA-Z0-9]*[a-z][a-zA-Z0-9]*$')),
    ('UPPER_CASE', re.compile(r'^[A-Z][A-Z0-9_]*$')),
    ('lowercase', re.compile(r'^[a-z][a-z0-9]*$')),
]
MIXED = 'mixed'


def classify_key(key: str) -> str:
    for name, pattern in KEY_PATTERNS:
        if pattern.fullmatch(key):
            return name
    return MIXED


def iter_keys(data: Any, parent_key: str = ''):
    """Yield (path, key) for every object key at any depth, in document order."""
    kind = kind_of(data)
    if kind is JsonKind.OBJECT:
        for k, v in data.items():
            current_key = key_path(parent_key, k)
            yield current_key, k
            yield from iter_keys(v, current_key)
    elif kind is JsonKind.ARRAY:
        for idx, item in enumerate(data):
            yield from iter_keys(item, index_path(parent_key, idx))


def analyze_keys(tree: Any) -> Dict[str, Any]:
    # dict as an ordered set of paths
    unique: Dict[str, None] = {}
    patterns: Dict[str, int] = {name: 0 for name, _ in KEY_PATTERNS}
    patterns[MIXED] = 0
    occurrences = 0
    total_length = 0
    min_length = None
    max_length = 0

    for path, key in iter_keys(tree):
        unique.setdefault(path, None)
        patterns[classify_key(key)] += 1
        occurrences += 1
        total_length += len(key)
        max_length = max(max_length, len(key))
        min_length = len(key) if min_length is None else min(min_length, len(key))

    return {
        'total_keys': len(unique),
        'unique_keys': list(unique),
        'occurrences': occurrences,
        'key_patterns': patterns,
        'key_lengths': {
            'total': total_length,
            'average': total_length / occurrences if occurrences else 0,
            'min': min_length or 0,
            'max': max_length,
        },
    }
