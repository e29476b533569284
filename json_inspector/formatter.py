from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .errors import InternalInvariantViolation

COMPACT_SEPARATORS = (",", ":")
PRETTY_SEPARATORS = (",", ": ")


@dataclass
class FormatOptions:
    indent_size: int = 2
    sort_keys: bool = False
    # JSON has no comments; accepted so callers can pass the UI toggle through.
    remove_comments: bool = False
    compact: bool = False

    def __post_init__(self):
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ValueError(f"indent_size must be an integer, got {self.indent_size!r}")
        if self.indent_size < 0:
            raise ValueError(f"indent_size must be >= 0, got {self.indent_size}")


def format_tree(tree: Any, options: FormatOptions = None) -> str:
    """Serialize a parsed tree.

    `compact` wins over `indent_size`. An indent of 0 still breaks lines,
    it just does not indent them.
    """
    options = options or FormatOptions()
    if options.compact:
        indent = None
        separators = COMPACT_SEPARATORS
    else:
        indent = options.indent_size
        separators = PRETTY_SEPARATORS

    try:
        return json.dumps(
            tree,
            indent=indent,
            separators=separators,
            sort_keys=options.sort_keys,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise InternalInvariantViolation(f"Tree is not serializable as JSON: {exc}") from exc


def minify_tree(tree: Any) -> str:
    return format_tree(tree, FormatOptions(compact=True))
