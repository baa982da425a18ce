"""Pairwise Pearson correlation across numeric columns."""

import math
import warnings
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy import stats

from .config import MIN_CORRELATION_PAIRS, STAT_PRECISION
from .statistics import scale_exponent
from .table import Table


def paired_values(first: Sequence[Optional[float]],
                  second: Sequence[Optional[float]]) -> Tuple[List[float], List[float]]:
    """Row-aligned values where both columns have a numeric reading."""
    xs, ys = [], []
    for x, y in zip(first, second):
        if x is not None and y is not None:
            xs.append(x)
            ys.append(y)
    return xs, ys


def pearson(xs: Sequence[float], ys: Sequence[float],
            min_pairs: int = MIN_CORRELATION_PAIRS) -> float:
    """
    Pearson coefficient rounded to 4 decimals.

    Returns 0.0 with fewer than ``min_pairs`` observations or when the
    coefficient is undefined (a constant series).
    """
    if len(xs) < min_pairs:
        return 0.0
    # The coefficient is scale-free, so huge values are scaled down first
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    x = np.ldexp(x, -scale_exponent(x))
    y = np.ldexp(y, -scale_exponent(y))
    with warnings.catch_warnings():
        warnings.simplefilter('ignore')
        coefficient = float(stats.pearsonr(x, y)[0])
    if math.isnan(coefficient):
        return 0.0
    return round(coefficient, STAT_PRECISION)


def correlation_matrix(table: Table,
                       numeric_columns: Sequence[str],
                       min_pairs: int = MIN_CORRELATION_PAIRS) -> Dict[str, Dict[str, float]]:
    """
    Full square correlation matrix over ``numeric_columns``.

    Each pair uses only the rows where both columns are numeric. The
    diagonal is exactly 1.0 and the lower triangle mirrors the upper one.
    """
    readings = {
        column: [cell.as_number() for cell in table.column(column)]
        for column in numeric_columns
    }
    matrix: Dict[str, Dict[str, float]] = {column: {} for column in numeric_columns}

    for i, col1 in enumerate(numeric_columns):
        matrix[col1][col1] = 1.0
        for col2 in numeric_columns[i + 1:]:
            xs, ys = paired_values(readings[col1], readings[col2])
            value = pearson(xs, ys, min_pairs)
            matrix[col1][col2] = value
            matrix[col2][col1] = value

    # Restore column order within each row
    return {
        col1: {col2: matrix[col1][col2] for col2 in numeric_columns}
        for col1 in numeric_columns
    }
