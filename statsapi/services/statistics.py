"""Descriptive statistics over a finite numeric dataset."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Optional, Sequence

from statsapi.errors import EmptyDataError, InvalidInputError, UndefinedStatisticError

__all__: list[str] = [
    "PRECISION",
    "StatisticsResult",
    "compute_statistics",
]

# Decimal digits kept in the output record
PRECISION = 4

TOO_LARGE = "values are too large to compute statistics"


@dataclass(frozen=True)
class StatisticsResult:
    """Rounded statistics for one dataset.

    ``skewness`` and ``coefficient_of_variation`` are ``None`` when they are
    undefined for the data (division by zero).
    """

    count: int
    sum: float
    mean: float
    median: float
    mode: float
    variance: float
    std_dev: float
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    skewness: Optional[float]
    coefficient_of_variation: Optional[float]

    def as_dict(self) -> dict[str, Optional[float]]:
        return asdict(self)


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, PRECISION)


def _median(ordered: Sequence[float]) -> float:
    n = len(ordered)
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def _mode(ordered: Sequence[float]) -> float:
    # Counter keeps first-seen order; on sorted input that makes ties go to the smallest value
    counts = Counter(ordered)
    best, best_count = ordered[0], 0
    for value, count in counts.items():
        if count > best_count:
            best, best_count = value, count
    return best


def compute_statistics(data: Sequence[float], *, strict: bool = False) -> StatisticsResult:
    """
    Compute count, sum, mean, median, mode, population variance and standard
    deviation, min, max, range, nearest-rank quartiles, IQR, Pearson's second
    skewness coefficient and the coefficient of variation.

    Raises EmptyDataError if ``data`` is empty and InvalidInputError if it holds
    non-finite values or values whose statistics overflow a float. Undefined
    skewness / coefficient of variation are reported as None, or raise
    UndefinedStatisticError when ``strict`` is set.
    """
    if not data:
        raise EmptyDataError()
    try:
        ordered = sorted(float(v) for v in data)
    except OverflowError as exc:
        raise InvalidInputError(TOO_LARGE) from exc
    if not all(math.isfinite(v) for v in ordered):
        raise InvalidInputError("data must contain only finite numbers")

    n = len(ordered)
    try:
        total = math.fsum(ordered)
        avg = total / n
        variance = math.fsum((v - avg) ** 2 for v in ordered) / n
    except OverflowError as exc:
        raise InvalidInputError(TOO_LARGE) from exc
    std_dev = math.sqrt(variance)
    med = _median(ordered)

    q1 = ordered[math.floor(n * 0.25)]
    q3 = ordered[math.floor(n * 0.75)]
    lo, hi = ordered[0], ordered[-1]

    skewness: Optional[float] = None
    if std_dev > 0:
        skewness = 3 * (avg - med) / std_dev
    elif strict:
        raise UndefinedStatisticError("skewness", "standard deviation is zero")

    cv: Optional[float] = None
    if std_dev == 0:
        cv = 0.0
    elif avg != 0:
        cv = std_dev / avg * 100
    elif strict:
        raise UndefinedStatisticError("coefficient of variation", "mean is zero")

    # Float arithmetic saturates to inf instead of raising past this point
    derived = (variance, med, hi - lo, q3 - q1, skewness, cv)
    if not all(math.isfinite(x) for x in derived if x is not None):
        raise InvalidInputError(TOO_LARGE)

    return StatisticsResult(
        count=n,
        sum=_round(total),
        mean=_round(avg),
        median=_round(med),
        mode=_round(_mode(ordered)),
        variance=_round(variance),
        std_dev=_round(std_dev),
        min=_round(lo),
        max=_round(hi),
        range=_round(hi - lo),
        q1=_round(q1),
        q3=_round(q3),
        iqr=_round(q3 - q1),
        skewness=_round(skewness),
        coefficient_of_variation=_round(cv),
    )
