"""Diagnostic records and the exception taxonomy shared by the pipeline stages."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

EMPTY_INPUT_MESSAGE = "JSON input is empty"

LINE_RE = re.compile(r"line (\d+)", re.IGNORECASE)
COLUMN_RE = re.compile(r"column (\d+)", re.IGNORECASE)


@dataclass
class JsonError:
    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    position: Optional[int] = None
    severity: str = "error"

    def location(self) -> str:
        if self.line is None:
            return ""
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"message": self.message, "severity": self.severity}
        for name in ("line", "column", "position"):
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out


@dataclass
class JsonWarning(JsonError):
    severity: str = "warning"


@dataclass
class ValidationResult:
    errors: List[JsonError] = field(default_factory=list)
    warnings: List[JsonWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }


def extract_line_number(message: str) -> Optional[int]:
    match = LINE_RE.search(message or "")
    return int(match.group(1)) if match else None


def extract_column_number(message: str) -> Optional[int]:
    match = COLUMN_RE.search(message or "")
    return int(match.group(1)) if match else None


class JsonInspectorError(Exception):
    """Base class for errors raised by json_inspector."""


class InvalidJsonError(JsonInspectorError, ValueError):
    """Text handed to a transformation did not parse."""

    def __init__(self, error: JsonError):
        super().__init__(f"Invalid JSON: {error.message}")
        self.error = error


class InputTooLargeError(JsonInspectorError, ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"File too large. Maximum size is {limit / (1024 * 1024):.1f} MB.")
        self.size = size
        self.limit = limit


class InternalInvariantViolation(JsonInspectorError, RuntimeError):
    """A value outside the JSON model reached a stage that assumes a parsed tree."""
