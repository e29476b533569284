from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from .formatter import minify_tree
from .key_analysis import analyze_keys
from .performance import measure_performance
from .structure import analyze_structure, compute_depth
from .type_stats import analyze_data_types
from .value_distribution import TOP_N, analyze_value_distribution
from .values import kind_of

logger = logging.getLogger(__name__)


@dataclass
class JsonStats:
    type: str
    size: int
    depth: int
    data_types: Dict[str, Any]
    key_analysis: Dict[str, Any]
    value_distribution: Dict[str, Any]
    structure_analysis: Dict[str, Any]
    performance: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        # Sections are already plain dicts; the hierarchy is not deep-copied.
        return {f.name: getattr(self, f.name) for f in fields(self)}


def analyze_tree(tree: Any, top_values: int = TOP_N) -> JsonStats:
    """Build the full statistics report for a parsed tree.

    Every sub-metric owns its accumulator for the duration of its walk, so
    nothing is shared between calls.
    """
    stats = JsonStats(
        type=kind_of(tree).value,
        size=len(minify_tree(tree)),
        depth=compute_depth(tree),
        data_types=analyze_data_types(tree),
        key_analysis=analyze_keys(tree),
        value_distribution=analyze_value_distribution(tree, top=top_values),
        structure_analysis=analyze_structure(tree),
        performance=measure_performance(tree),
    )
    logger.debug(
        "Analyzed %s document: size=%d depth=%d keys=%d",
        stats.type,
        stats.size,
        stats.depth,
        stats.key_analysis['total_keys'],
    )
    return stats
