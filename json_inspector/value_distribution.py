from __future__ import annotations

import re
from collections import Counter
from typing import Any, Dict, List

from .values import JsonKind, kind_of

TOP_N = 10

NUMERIC_RE = re.compile(r'^[0-9]+$')
ALPHANUMERIC_RE = re.compile(r'^[A-Za-z0-9]+$')

BUCKETS = {
    JsonKind.STRING: 'strings',
    JsonKind.NUMBER: 'numbers',
    JsonKind.BOOLEAN: 'booleans',
    JsonKind.NULL: 'nulls',
    JsonKind.ARRAY: 'arrays',
    JsonKind.OBJECT: 'objects',
}


def string_pattern(value: str) -> str:
    if value == '':
        return 'empty'
    if not value.strip():
        return 'whitespace'
    if NUMERIC_RE.fullmatch(value):
        return 'numeric'
    if ALPHANUMERIC_RE.fullmatch(value):
        return 'alphanumeric'
    return 'special'


def top_values(counter: Counter, limit: int) -> List[Dict[str, Any]]:
    # most_common keeps first-seen order among equal counts
    return [{'value': value, 'count': count} for value, count in counter.most_common(max(limit, 0))]


def analyze_value_distribution(tree: Any, top: int = TOP_N) -> Dict[str, Any]:
    """Frequency of values per type plus a histogram of string content shapes.

    Arrays and objects are tallied by their length and key count. Each type
    has its own counter, so `true` never merges with `1`.
    """
    counters = {bucket: Counter() for bucket in BUCKETS.values()}
    patterns = {'empty': 0, 'whitespace': 0, 'numeric': 0, 'alphanumeric': 0, 'special': 0}

    # Pre-order, left to right, so ties resolve in document order.
    stack = [tree]
    while stack:
        node = stack.pop()
        kind = kind_of(node)
        bucket = BUCKETS[kind]
        if kind is JsonKind.ARRAY:
            counters[bucket][len(node)] += 1
            stack.extend(reversed(node))
        elif kind is JsonKind.OBJECT:
            counters[bucket][len(node)] += 1
            stack.extend(reversed(list(node.values())))
        else:
            counters[bucket][node] += 1
            if kind is JsonKind.STRING:
                patterns[string_pattern(node)] += 1

    return {
        'by_type': {bucket: top_values(counter, top) for bucket, counter in counters.items()},
        'unique_values': {bucket: len(counter) for bucket, counter in counters.items()},
        'patterns': patterns,
    }
