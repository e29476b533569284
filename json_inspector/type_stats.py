"""Per-kind counts and size statistics for every value in a tree."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from .values import JsonKind, is_integer, kind_of


class _Running:
    """count/total/min/max over a stream of numbers; min/max stay None until fed."""

    def __init__(self):
        self.count = 0
        self.total = 0
        self.min: Optional[float] = None
        self.max: Optional[float] = None

    def add(self, amount):
        self.count += 1
        try:
            self.total += amount
        except OverflowError:
            # int total beyond the float range meeting a float
            self.total = math.inf if self.total > 0 else -math.inf
        if self.min is None or amount < self.min:
            self.min = amount
        if self.max is None or amount > self.max:
            self.max = amount

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0


class TypeTally:
    def __init__(self):
        self.strings = _Running()
        self.numbers = _Running()
        self.arrays = _Running()
        self.objects = _Running()
        self.integers = 0
        self.decimals = 0
        self.true = 0
        self.false = 0
        self.nulls = 0

    def visit(self, value: Any) -> None:
        kind = kind_of(value)
        if kind is JsonKind.NULL:
            self.nulls += 1
        elif kind is JsonKind.BOOLEAN:
            if value:
                self.true += 1
            else:
                self.false += 1
        elif kind is JsonKind.NUMBER:
            self.numbers.add(value)
            if is_integer(value):
                self.integers += 1
            else:
                self.decimals += 1
        elif kind is JsonKind.STRING:
            self.strings.add(len(value))
        elif kind is JsonKind.ARRAY:
            self.arrays.add(len(value))
            for item in value:
                self.visit(item)
        else:
            self.objects.add(len(value))
            for item in value.values():
                self.visit(item)

    def summary(self) -> Dict[str, Dict[str, Any]]:
        strings, numbers, arrays, objects = self.strings, self.numbers, self.arrays, self.objects
        return {
            'strings': {
                'count': strings.count,
                'total_length': strings.total,
                'average_length': strings.average,
                'min_length': strings.min or 0,
                'max_length': strings.max or 0,
            },
            'numbers': {
                'count': numbers.count,
                'total': numbers.total,
                'average': numbers.average,
                'min': numbers.min if numbers.min is not None else 0,
                'max': numbers.max if numbers.max is not None else 0,
                'integers': self.integers,
                'decimals': self.decimals,
            },
            'booleans': {
                'count': self.true + self.false,
                'true': self.true,
                'false': self.false,
            },
            'nulls': {'count': self.nulls},
            'arrays': {
                'count': arrays.count,
                'total_elements': arrays.total,
                'average_length': arrays.average,
                'min_length': arrays.min or 0,
                'max_length': arrays.max or 0,
            },
            'objects': {
                'count': objects.count,
                'total_keys': objects.total,
                'average_keys': objects.average,
                'min_keys': objects.min or 0,
                'max_keys': objects.max or 0,
            },
        }


def analyze_data_types(tree: Any) -> Dict[str, Dict[str, Any]]:
    tally = TypeTally()
    tally.visit(tree)
    return tally.summary()
