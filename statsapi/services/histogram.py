"""Equal-width histogram binning."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Sequence

from statsapi.errors import EmptyDataError, InvalidInputError

__all__: list[str] = [
    "HistogramBin",
    "build_histogram",
]


@dataclass(frozen=True)
class HistogramBin:
    """Bin covering [bin_start, bin_end); the last bin also includes bin_end."""

    bin_start: float
    bin_end: float
    count: int
    percentage: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 2)


def build_histogram(data: Sequence[float], bins: int = 10) -> list[HistogramBin]:
    """
    Split [min, max] of ``data`` into ``bins`` equal-width bins and count the
    values falling in each one. Bins are half-open [bin_start, bin_end) except
    the last, which ends exactly at the maximum and includes it.

    When every value is equal the range has zero width and a single bin
    [min, max] holding all values is returned, whatever ``bins`` is.

    Raises EmptyDataError if ``data`` is empty and InvalidInputError for a
    non-positive bin count, non-finite values or a range too wide for a float.
    """
    if isinstance(bins, bool) or not isinstance(bins, int) or bins < 1:
        raise InvalidInputError("bins must be a positive integer")
    if not data:
        raise EmptyDataError()
    try:
        ordered = sorted(float(v) for v in data)
    except OverflowError as exc:
        raise InvalidInputError("values are too large to bin") from exc
    if not all(math.isfinite(v) for v in ordered):
        raise InvalidInputError("data must contain only finite numbers")

    n = len(ordered)
    lo, hi = ordered[0], ordered[-1]
    if lo == hi:
        return [HistogramBin(bin_start=lo, bin_end=hi, count=n, percentage=_percentage(n, n))]
    span = hi - lo
    if not math.isfinite(span):
        raise InvalidInputError("range of values is too large to bin")

    bin_size = span / bins
    edges = [lo + i * bin_size for i in range(bins)] + [hi]
    counts = [0] * bins
    for value in ordered:
        index = min(math.floor((value - lo) / span * bins), bins - 1)
        # Snap to the edges so every value sits in [edges[i], edges[i + 1])
        while index > 0 and value < edges[index]:
            index -= 1
        while index < bins - 1 and value >= edges[index + 1]:
            index += 1
        counts[index] += 1

    return [
        HistogramBin(
            bin_start=edges[i],
            bin_end=edges[i + 1],
            count=count,
            percentage=_percentage(count, n),
        )
        for i, count in enumerate(counts)
    ]
