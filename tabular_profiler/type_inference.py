"""
Column type inference.

A column is typed from a sample of its non-missing cells: each sampled value
is classified as boolean, numeric or datetime (in that precedence), and a
type wins when its share of the sample strictly exceeds the threshold.
"""

import logging
import warnings
from typing import Dict, Sequence

import pandas as pd

from .config import (
    BOOLEAN_TOKENS, DATE_PATTERNS, NUMERIC_BOOLEAN_TOKENS,
    TYPE_SAMPLE_SIZE, TYPE_THRESHOLD
)
from .models import ColumnType
from .table import Cell, parse_number

logger = logging.getLogger(__name__)


def looks_like_date(text: str) -> bool:
    """True for known date prefixes or text pandas can parse as a date."""
    if any(pattern.match(text) for pattern in DATE_PATTERNS):
        return True
    # Free text without any digit is never a calendar date
    if not any(ch.isdigit() for ch in text):
        return False
    try:
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            parsed = pd.to_datetime(text, errors='coerce')
    except (ValueError, TypeError, OverflowError):
        return False
    return not pd.isna(parsed)


def classify_value(text: str) -> str:
    """Bucket one trimmed value: 'boolean', 'numeric', 'datetime' or ''."""
    if text.lower() in BOOLEAN_TOKENS:
        return 'boolean'
    if parse_number(text) is not None:
        return 'numeric'
    if looks_like_date(text):
        return 'datetime'
    return ''


def count_sample_types(cells: Sequence[Cell],
                       sample_size: int = TYPE_SAMPLE_SIZE) -> Dict[str, int]:
    """Classify the first ``sample_size`` non-missing cells of a column."""
    counts = {'numeric': 0, 'datetime': 0, 'boolean': 0, 'numeric_boolean': 0, 'total': 0}

    for cell in cells:
        if counts['total'] >= sample_size:
            break
        if cell.is_missing:
            continue
        counts['total'] += 1

        text = cell.as_text().strip()
        bucket = classify_value(text)
        if bucket:
            counts[bucket] += 1
        if bucket == 'boolean' and text in NUMERIC_BOOLEAN_TOKENS:
            counts['numeric_boolean'] += 1

    return counts


def infer_column_type(cells: Sequence[Cell],
                      sample_size: int = TYPE_SAMPLE_SIZE,
                      threshold: float = TYPE_THRESHOLD) -> ColumnType:
    """
    Infer the type of one column.

    Args:
        cells: All cells of the column, in row order
        sample_size: Number of non-missing cells inspected
        threshold: Share of the sample a type must strictly exceed

    Returns:
        The inferred column type; ``UNKNOWN`` when every cell is missing
    """
    counts = count_sample_types(cells, sample_size)
    total = counts['total']
    if total == 0:
        return ColumnType.UNKNOWN

    if counts['numeric'] / total > threshold:
        return ColumnType.NUMERIC
    if counts['datetime'] / total > threshold:
        return ColumnType.DATETIME
    if counts['boolean'] / total > threshold:
        return ColumnType.BOOLEAN

    # "0"/"1" are claimed as booleans first; a column that is numeric once
    # they are counted back in (e.g. 1, 2, 2) is still numeric.
    if (counts['numeric'] + counts['numeric_boolean']) / total > threshold:
        return ColumnType.NUMERIC

    return ColumnType.CATEGORICAL
