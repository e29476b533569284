from __future__ import annotations

import math
from collections import Counter
from typing import Any, Dict

from .paths import ROOT_PATH, index_path, key_path
from .values import JsonKind, children, is_container, kind_of


def compute_depth(data: Any) -> int:
    """0 for scalars; a container is one level plus its deepest child, so `[]` is 1."""
    if not is_container(data):
        return 0
    return 1 + max((compute_depth(child) for child in children(data)), default=0)


def build_hierarchy(data: Any, path: str = ROOT_PATH, depth: int = 0) -> Dict[str, Any]:
    """Mirror the tree, annotating every node with its path, type and depth."""
    kind = kind_of(data)
    if kind is JsonKind.ARRAY:
        return {
            'path': path,
            'type': kind.value,
            'depth': depth,
            'length': len(data),
            'children': [
                build_hierarchy(item, index_path(path, idx), depth + 1)
                for idx, item in enumerate(data)
            ],
        }
    if kind is JsonKind.OBJECT:
        return {
            'path': path,
            'type': kind.value,
            'depth': depth,
            'keys': list(data.keys()),
            'key_count': len(data),
            'children': {
                k: build_hierarchy(v, key_path(path, k), depth + 1)
                for k, v in data.items()
            },
        }
    return {'path': path, 'type': kind.value, 'depth': depth, 'value': data}


def _containers(data: Any, depth: int = 0):
    """Yield (container, depth) for every array/object, root at depth 0."""
    if not is_container(data):
        return
    yield data, depth
    for child in children(data):
        yield from _containers(child, depth + 1)


def calculate_complexity(data: Any) -> Dict[str, float]:
    """Synthetic scores for comparing documents; not an industry metric.

    cyclomatic: sum of child counts; cognitive: sum of log2(children + 1);
    structural: sum of container depths; data: number of containers.
    """
    complexity = {'cyclomatic': 0, 'cognitive': 0.0, 'structural': 0, 'data': 0}
    for container, depth in _containers(data):
        size = len(container)
        complexity['cyclomatic'] += size
        complexity['cognitive'] += math.log2(size + 1)
        complexity['structural'] += depth
        complexity['data'] += 1
    return complexity


def analyze_nesting(data: Any) -> Dict[str, Any]:
    distribution: Counter = Counter(depth for _, depth in _containers(data))
    count = sum(distribution.values())
    total = sum(depth * freq for depth, freq in distribution.items())
    return {
        'max_depth': max(distribution, default=0),
        'average_depth': total / count if count else 0,
        'depth_distribution': dict(sorted(distribution.items())),
    }


def analyze_structure(data: Any) -> Dict[str, Any]:
    return {
        'hierarchy': build_hierarchy(data),
        'complexity': calculate_complexity(data),
        'nesting': analyze_nesting(data),
    }
