from __future__ import annotations

import math
import time
from typing import Any, Dict

from .formatter import minify_tree
from .values import JsonKind, kind_of

# Rough gzip ratio for typical JSON; a fixed estimate, not a measurement.
COMPRESSION_RATIO = 0.3


def utf8_length(text: str) -> int:
    # A lone surrogate (a "\ud800" escape in the source) counts as three bytes.
    return len(text.encode('utf-8', 'surrogatepass'))


def estimate_compressed_size(characters: int) -> int:
    # Half rounds up, unlike round().
    return math.floor(characters * COMPRESSION_RATIO + 0.5)


def count_operations(data: Any) -> int:
    """Scalars cost 1; each array element or object key adds 1 on top of its own cost."""
    kind = kind_of(data)
    if kind is JsonKind.ARRAY:
        return sum(1 + count_operations(item) for item in data)
    if kind is JsonKind.OBJECT:
        return sum(1 + count_operations(v) for v in data.values())
    return 1


def measure_performance(data: Any) -> Dict[str, Any]:
    started = time.perf_counter()
    serialized = minify_tree(data)
    elapsed_ms = (time.perf_counter() - started) * 1000

    characters = len(serialized)
    size_bytes = utf8_length(serialized)
    return {
        'serialization_time_ms': elapsed_ms,
        'size': {
            'characters': characters,
            'bytes': size_bytes,
            'compressed': estimate_compressed_size(characters),
        },
        'complexity': {
            'operations': count_operations(data),
            'memory': size_bytes,
        },
    }
