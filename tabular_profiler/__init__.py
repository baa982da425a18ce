"""Tabular data profiling engine."""

from .exceptions import DataProfilingError, InvalidTableError, ProfilingError
from .models import (
    CategoryCount, ColumnType, DataProfile, DistributionBin, NumericStats, OutlierInfo, Shape
)
from .profiling_module import DataProfiler, analyze_data
from .table import Table

__version__ = '1.0.0'

__all__ = [
    'CategoryCount',
    'ColumnType',
    'DataProfile',
    'DataProfiler',
    'DataProfilingError',
    'DistributionBin',
    'InvalidTableError',
    'NumericStats',
    'OutlierInfo',
    'ProfilingError',
    'Shape',
    'Table',
    'analyze_data',
]
