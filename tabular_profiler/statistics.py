"""Per-column descriptive statistics for numeric and categorical columns."""

from typing import Dict, List, Sequence

import numpy as np

from .config import (
    EMPTY_LABEL, PERCENT_PRECISION, SAFE_MAGNITUDE, STAT_PRECISION, TOP_N_CATEGORIES
)
from .models import CategoryCount, NumericStats
from .table import Cell

FLOAT_MAX = float(np.finfo(float).max)


def numeric_values(cells: Sequence[Cell]) -> List[float]:
    """Numeric readings of a column, skipping missing and non-numeric cells."""
    values = []
    for cell in cells:
        value = cell.as_number()
        if value is not None:
            values.append(value)
    return values


def quantile(sorted_values: np.ndarray, q: float) -> float:
    """Linear-interpolation quantile of already sorted values."""
    return float(np.quantile(sorted_values, q, method='linear'))


def scale_exponent(data: np.ndarray) -> int:
    """
    Power of two to divide ``data`` by so that its sums, spreads and squares
    stay finite. Zero unless some value exceeds ``SAFE_MAGNITUDE``.
    """
    if len(data) == 0:
        return 0
    largest = float(np.abs(data).max())
    if largest < SAFE_MAGNITUDE:
        return 0
    return int(np.frexp(largest)[1])


def unscale(value: float, exponent: int) -> float:
    """Undo :func:`scale_exponent`, capped at the largest finite float."""
    return float(np.clip(np.ldexp(value, exponent), -FLOAT_MAX, FLOAT_MAX))


def count_missing(cells: Sequence[Cell]) -> int:
    return sum(1 for cell in cells if cell.is_missing)


def numeric_stats(values: Sequence[float]) -> NumericStats:
    """
    Summary statistics of valid numeric values.

    Uses the sample standard deviation (N-1); a single value has a spread of
    zero. An empty input yields an all-zero record.
    """
    if len(values) == 0:
        return NumericStats()

    data = np.sort(np.asarray(values, dtype=float))
    exponent = scale_exponent(data)
    scaled = np.ldexp(data, -exponent)
    std = float(np.std(scaled, ddof=1)) if len(data) > 1 else 0.0

    return NumericStats(
        count=len(data),
        mean=round(unscale(float(np.mean(scaled)), exponent), STAT_PRECISION),
        std=round(unscale(std, exponent), STAT_PRECISION),
        min=round(float(data[0]), STAT_PRECISION),
        q25=round(unscale(quantile(scaled, 0.25), exponent), STAT_PRECISION),
        median=round(unscale(quantile(scaled, 0.5), exponent), STAT_PRECISION),
        q75=round(unscale(quantile(scaled, 0.75), exponent), STAT_PRECISION),
        max=round(float(data[-1]), STAT_PRECISION),
    )


def categorical_stats(cells: Sequence[Cell], top_n: int = TOP_N_CATEGORIES) -> List[CategoryCount]:
    """
    Most frequent values of a column.

    Missing cells are counted under ``EMPTY_LABEL``. Percentages are relative
    to the full row count. Equal counts keep first-seen order.
    """
    total = len(cells)
    if total == 0:
        return []

    counts: Dict[str, int] = {}
    for cell in cells:
        label = EMPTY_LABEL if cell.is_missing else cell.as_text()
        counts[label] = counts.get(label, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryCount(
            value=value,
            count=count,
            percentage=round(count / total * 100, PERCENT_PRECISION),
        )
        for value, count in ranked[:top_n]
    ]
