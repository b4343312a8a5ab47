"""Helpers that turn loosely typed input into finite floats."""
from __future__ import annotations

import math
from typing import Any, Iterable, Optional

__all__: list[str] = [
    "filter_numeric",
    "parse_numeric",
]


def filter_numeric(values: Iterable[Any]) -> list[float]:
    """
    Keep the finite int/float entries of ``values``, in order.
    Booleans, strings, None, NaN, infinities and integers too large for a
    float are dropped.
    """
    kept = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        try:
            value = float(value)
        except OverflowError:
            continue
        if math.isfinite(value):
            kept.append(value)
    return kept


def parse_numeric(cell: Optional[str]) -> Optional[float]:
    """Parse a CSV cell into a finite float, or None if it is not numeric."""
    if cell is None:
        return None
    try:
        value = float(cell.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None
