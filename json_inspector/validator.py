"""Syntax validation plus heuristic authoring warnings.

The warning scans look at the raw text, string literals included, so a
URL such as "http://example.com" inside a value raises the comment warning.
They can only add warnings; validity is decided by the parser alone.
"""

from __future__ import annotations

import re
from typing import List

from .errors import JsonWarning, ValidationResult
from .parser import ParseResult, parse

TRAILING_COMMA_RE = re.compile(r",\s*[}\]]")

TRAILING_COMMA_WARNING = "Trailing commas detected (not valid in JSON)"
SINGLE_QUOTE_WARNING = "Single quotes detected (use double quotes in JSON)"
COMMENT_WARNING = "Comments detected (not valid in JSON)"
UNDEFINED_WARNING = "Undefined values detected (use null instead)"


def warning_at(message: str, text: str, position: int) -> JsonWarning:
    line = text.count("\n", 0, position) + 1
    column = position - text.rfind("\n", 0, position)
    return JsonWarning(message=message, line=line, column=column, position=position)


def scan_warnings(text: str) -> List[JsonWarning]:
    warnings: List[JsonWarning] = []

    match = TRAILING_COMMA_RE.search(text)
    if match:
        warnings.append(warning_at(TRAILING_COMMA_WARNING, text, match.start()))

    if "'" in text:
        warnings.append(warning_at(SINGLE_QUOTE_WARNING, text, text.index("'")))

    comment_positions = [p for p in (text.find("//"), text.find("/*")) if p >= 0]
    if comment_positions:
        warnings.append(warning_at(COMMENT_WARNING, text, min(comment_positions)))

    if "undefined" in text:
        warnings.append(warning_at(UNDEFINED_WARNING, text, text.index("undefined")))

    return warnings


def duplicate_key_warnings(parsed: ParseResult) -> List[JsonWarning]:
    return [
        JsonWarning(message=f"Duplicate key '{key}' detected (last value wins)")
        for key in parsed.duplicate_keys
    ]


def validate(text: str) -> ValidationResult:
    result = ValidationResult()
    parsed = parse(text)
    if not parsed.ok:
        result.errors.append(parsed.error)
        return result

    result.warnings.extend(scan_warnings(text))
    result.warnings.extend(duplicate_key_warnings(parsed))
    return result
