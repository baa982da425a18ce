"""IQR-based outlier detection (Tukey fences)."""

from typing import Sequence, Tuple

import numpy as np

from .config import IQR_MULTIPLIER, PERCENT_PRECISION, STAT_PRECISION
from .models import OutlierInfo
from .statistics import quantile, scale_exponent, unscale


def iqr_bounds(values: Sequence[float], multiplier: float = IQR_MULTIPLIER) -> Tuple[float, float]:
    """Lower and upper fence: ``Q1 - k*IQR`` and ``Q3 + k*IQR``."""
    data = np.sort(np.asarray(values, dtype=float))
    exponent = scale_exponent(data)
    scaled = np.ldexp(data, -exponent)
    q1 = quantile(scaled, 0.25)
    q3 = quantile(scaled, 0.75)
    iqr = q3 - q1
    return unscale(q1 - multiplier * iqr, exponent), unscale(q3 + multiplier * iqr, exponent)


def detect_outliers(values: Sequence[float], multiplier: float = IQR_MULTIPLIER) -> OutlierInfo:
    """
    Count values strictly outside the IQR fences.

    Args:
        values: Valid numeric values of one column
        multiplier: Fence distance in IQRs

    Returns:
        Outlier count, percentage of valid values and the fences
    """
    if len(values) == 0:
        return OutlierInfo()

    lower_bound, upper_bound = iqr_bounds(values, multiplier)
    data = np.asarray(values, dtype=float)
    outlier_count = int(((data < lower_bound) | (data > upper_bound)).sum())

    return OutlierInfo(
        count=outlier_count,
        percentage=round(outlier_count / len(data) * 100, PERCENT_PRECISION),
        lower_bound=round(lower_bound, STAT_PRECISION),
        upper_bound=round(upper_bound, STAT_PRECISION),
    )
