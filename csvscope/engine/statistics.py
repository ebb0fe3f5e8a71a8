"""Per-column descriptive statistics."""

import logging
import math
from collections.abc import Sequence

import numpy as np

from csvscope.engine.types import infer_column_type
from csvscope.models import ColumnStatistics

log = logging.getLogger(__name__)


def _to_floats(values: Sequence[str]) -> list[float]:
    numbers: list[float] = []
    for value in values:
        try:
            number = float(value)
        except ValueError:
            continue
        # Integers too large for a double overflow to inf
        if math.isfinite(number):
            numbers.append(number)
    return numbers


def mean(values: np.ndarray) -> float:
    return float(np.mean(values))


def median(sorted_values: np.ndarray) -> float:
    """Median of an already ascending array."""
    n = len(sorted_values)
    mid = n // 2
    if n % 2 == 1:
        return float(sorted_values[mid])
    return float((sorted_values[mid - 1] + sorted_values[mid]) / 2.0)


def standard_deviation(values: np.ndarray) -> float | None:
    """Sample standard deviation (n - 1 denominator); None below two values."""
    if len(values) < 2:
        return None
    return float(np.std(values, ddof=1))


def analyze_column(name: str, values: Sequence[str]) -> ColumnStatistics:
    """Infer the type of one column and summarize its cells.

    ``values`` are the raw cells of the column in row order. Blank cells
    count as nulls and take no part in the numeric statistics.
    """
    non_null = [v.strip() for v in values if v.strip()]
    distinct = set(non_null)
    inferred = infer_column_type(distinct)
    log.debug("Column %r inferred as %s (%d distinct)", name, inferred.value, len(distinct))

    stats = ColumnStatistics(
        column_name=name,
        null_count=len(values) - len(non_null),
        unique_count=len(distinct),
        inferred_type=inferred,
    )
    if not inferred.is_numeric:
        return stats

    numbers = _to_floats(non_null)
    if not numbers:
        return stats

    arr = np.asarray(numbers, dtype=float)
    return stats.model_copy(
        update={
            "mean": mean(arr),
            "median": median(np.sort(arr)),
            "standard_deviation": standard_deviation(arr),
        }
    )
