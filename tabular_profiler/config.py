"""Configuration settings for the tabular profiling engine."""

import re
from typing import Dict, Any

# Type inference
TYPE_SAMPLE_SIZE = 100  # Non-missing values inspected per column
TYPE_THRESHOLD = 0.8  # Share of the sample a type must strictly exceed
BOOLEAN_TOKENS = frozenset({'true', 'false', '0', '1', 'yes', 'no'})
NUMERIC_BOOLEAN_TOKENS = frozenset({'0', '1'})

# Prefix patterns for calendar dates (ISO, US slash, US dash)
DATE_PATTERNS = (
    re.compile(r'^\d{4}-\d{2}-\d{2}'),
    re.compile(r'^\d{2}/\d{2}/\d{4}'),
    re.compile(r'^\d{2}-\d{2}-\d{4}'),
)

# Finite decimal literal: 12, -3.5, .5, 4., 1e3
NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')

# Column statistics
EMPTY_LABEL = '(empty)'
TOP_N_CATEGORIES = 10
STAT_PRECISION = 4  # Decimals for means, quantiles and bounds
PERCENT_PRECISION = 2  # Decimals for percentages

# Magnitude above which values are scaled by a power of two before squaring
SAFE_MAGNITUDE = 2.0 ** 500

# Outliers (Tukey fences)
IQR_MULTIPLIER = 1.5

# Distributions
HISTOGRAM_BINS = 10

# Correlations
MIN_CORRELATION_PAIRS = 3
HIGH_CORRELATION_THRESHOLD = 0.7

# Per-column pass; 1 runs sequentially
MAX_WORKERS = 1

# Command line reader settings (pandas does all decoding)
SUPPORTED_FORMATS = {'.csv', '.xlsx', '.json'}

# Cells are kept as text so the engine does its own typing
CSV_READ_PARAMS: Dict[str, Any] = {
    'dtype': str,
    'keep_default_na': False,
    'engine': 'c',
}

EXCEL_PARAMS: Dict[str, Any] = {
    'engine': 'openpyxl',
    'dtype': str,
    'keep_default_na': False,
}

JSON_PARAMS: Dict[str, Any] = {
    'dtype': False,
    'lines': False,
}
