"""Fixed-width histogram binning for numeric columns."""

from typing import List, Sequence

import numpy as np

from .config import HISTOGRAM_BINS
from .models import DistributionBin
from .statistics import scale_exponent, unscale


def bin_distribution(values: Sequence[float], bins: int = HISTOGRAM_BINS) -> List[DistributionBin]:
    """
    Split ``[min, max]`` into ``bins`` equal-width bins and count values.

    Bins are half-open ``[start, end)`` except the last, which is closed so
    the maximum is counted. A constant column has zero-width bins and all of
    its values land in the first one.
    """
    if len(values) == 0:
        return []

    data = np.asarray(values, dtype=float)
    exponent = scale_exponent(data)
    scaled = np.ldexp(data, -exponent)
    low = float(scaled.min())
    high = float(scaled.max())
    width = (high - low) / bins
    edges = [low + i * width for i in range(bins + 1)]

    if width == 0:
        indices = np.zeros(len(data), dtype=int)
    else:
        indices = np.searchsorted(edges, scaled, side='right') - 1
        indices = np.clip(indices, 0, bins - 1)

    counts = np.bincount(indices, minlength=bins)
    labels = [unscale(edge, exponent) for edge in edges]
    return [
        DistributionBin(label=f"{labels[i]:.1f}-{labels[i + 1]:.1f}", count=int(counts[i]))
        for i in range(bins)
    ]
