from __future__ import annotations

import json
import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import EMPTY_INPUT_MESSAGE, JsonError, extract_column_number, extract_line_number
from .values import children, is_container

logger = logging.getLogger(__name__)

# Deepest container nesting accepted, counted as in compute_depth (`[]` is 1).
MAX_NESTING_DEPTH = 200
NESTING_MESSAGE = "JSON too deeply nested"


@dataclass
class ParseResult:
    value: Any = None
    error: Optional[JsonError] = None
    duplicate_keys: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {literal}")
    return number


def _parse_bounded_int(literal: str) -> int:
    number = int(literal)
    if abs(number) > sys.float_info.max:
        raise ValueError(f"Number out of range: {literal[:20]}...")
    return number


def _nesting_exceeds(value: Any, limit: int) -> bool:
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if not is_container(node):
            continue
        if depth > limit:
            return True
        stack.extend((child, depth + 1) for child in children(node))
    return False


def _error_from_exception(exc: Exception) -> JsonError:
    if isinstance(exc, json.JSONDecodeError):
        return JsonError(message=str(exc), line=exc.lineno, column=exc.colno, position=exc.pos)
    message = str(exc)
    return JsonError(
        message=message,
        line=extract_line_number(message),
        column=extract_column_number(message),
    )


def parse(text: str) -> ParseResult:
    """Parse JSON text into native values, keeping source key order.

    Duplicate keys resolve last-value-wins and are reported in
    `duplicate_keys`. Malformed input never raises; the diagnostic is
    returned in `error`. Numbers outside the double range and nesting
    deeper than MAX_NESTING_DEPTH are rejected the same way.
    """
    if text is None or not str(text).strip():
        return ParseResult(error=JsonError(message=EMPTY_INPUT_MESSAGE))

    duplicates: List[str] = []

    def build_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
        obj: Dict[str, Any] = {}
        for key, value in pairs:
            if key in obj:
                duplicates.append(key)
            obj[key] = value
        return obj

    try:
        value = json.loads(
            text,
            object_pairs_hook=build_object,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
            parse_int=_parse_bounded_int,
        )
    except RecursionError:
        logger.debug("Parse aborted: nesting exceeds the interpreter recursion limit")
        return ParseResult(error=JsonError(message=NESTING_MESSAGE))
    except ValueError as exc:
        # JSONDecodeError is a ValueError; so is the constant rejection above.
        error = _error_from_exception(exc)
        logger.debug("Parse failed: %s", error.message)
        return ParseResult(error=error)

    if _nesting_exceeds(value, MAX_NESTING_DEPTH):
        logger.debug("Parse rejected: nesting deeper than %d levels", MAX_NESTING_DEPTH)
        return ParseResult(error=JsonError(message=NESTING_MESSAGE))

    logger.debug("Parsed %d characters (%d duplicate keys)", len(text), len(duplicates))
    return ParseResult(value=value, duplicate_keys=duplicates)
