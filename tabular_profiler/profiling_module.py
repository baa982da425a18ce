"""
Data profiling engine for tabular datasets.
Turns a table of records into a read-only DataProfile: column types, missing
counts, numeric and categorical statistics, outliers, distributions,
correlations and duplicate rows.
"""

import logging
from concurrent import futures
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Union

import pandas as pd
from tqdm import tqdm

from .config import (
    HISTOGRAM_BINS, IQR_MULTIPLIER, MAX_WORKERS, MIN_CORRELATION_PAIRS,
    TOP_N_CATEGORIES, TYPE_SAMPLE_SIZE, TYPE_THRESHOLD
)
from .correlation import correlation_matrix
from .distribution import bin_distribution
from .duplicates import count_duplicates
from .models import (
    CategoryCount, ColumnType, DataProfile, DistributionBin, NumericStats, OutlierInfo
)
from .outliers import detect_outliers
from .statistics import categorical_stats, count_missing, numeric_stats, numeric_values
from .table import Table, as_table
from .type_inference import infer_column_type

TableLike = Union[Table, pd.DataFrame, Iterable[Mapping[str, Any]]]


@dataclass
class ColumnResult:
    """Everything the per-column pass computes for one column."""

    name: str
    data_type: ColumnType
    missing: int
    numeric_stats: Optional[NumericStats] = None
    outliers: Optional[OutlierInfo] = None
    distribution: List[DistributionBin] = field(default_factory=list)
    categories: List[CategoryCount] = field(default_factory=list)

    @property
    def is_numeric(self) -> bool:
        return self.data_type == ColumnType.NUMERIC


class DataProfiler:
    """
    Profile tables with configurable heuristics.
    """

    def __init__(self,
                 sample_size: int = TYPE_SAMPLE_SIZE,
                 type_threshold: float = TYPE_THRESHOLD,
                 top_n: int = TOP_N_CATEGORIES,
                 bins: int = HISTOGRAM_BINS,
                 iqr_multiplier: float = IQR_MULTIPLIER,
                 min_correlation_pairs: int = MIN_CORRELATION_PAIRS,
                 max_workers: int = MAX_WORKERS,
                 show_progress: bool = False):
        """
        Initialize DataProfiler.

        Args:
            sample_size: Non-missing values inspected for type inference
            type_threshold: Share of the sample a type must strictly exceed
            top_n: Categories kept per categorical column
            bins: Histogram bins per numeric column
            iqr_multiplier: Outlier fence distance in IQRs
            min_correlation_pairs: Paired rows needed for a correlation
            max_workers: Threads for the per-column pass (1 = sequential)
            show_progress: Show a progress bar over columns
        """
        self.sample_size = sample_size
        self.type_threshold = type_threshold
        self.top_n = top_n
        self.bins = bins
        self.iqr_multiplier = iqr_multiplier
        self.min_correlation_pairs = min_correlation_pairs
        self.max_workers = max(1, max_workers)
        self.show_progress = show_progress
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Set up logging for profiling operations."""
        logger = logging.getLogger(f"{__name__}.DataProfiler")
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.setLevel(logging.INFO)
        # Prevent duplicate logs by stopping propagation to root logger
        logger.propagate = False
        return logger

    def profile(self, data: TableLike) -> DataProfile:
        """
        Generate the profile of a table.

        Args:
            data: A Table, a pandas DataFrame or a sequence of records

        Returns:
            Read-only DataProfile; an empty input gives an empty profile

        Raises:
            InvalidTableError: If the input is not a table of records
        """
        table = as_table(data)

        if len(table) == 0:
            self.logger.info("Empty table - returning empty profile")
            return DataProfile.empty()

        self.logger.info(f"Profiling table: {len(table):,} rows, {len(table.schema)} columns")

        results = self._profile_columns(table)

        numeric_columns = [result.name for result in results if result.is_numeric]
        correlations = correlation_matrix(table, numeric_columns, self.min_correlation_pairs)
        duplicates = count_duplicates(table)

        profile = DataProfile.build(
            columns=list(table.columns),
            row_count=len(table),
            data_types={r.name: r.data_type for r in results},
            missing_values={r.name: r.missing for r in results},
            duplicates=duplicates,
            numeric_stats={r.name: r.numeric_stats for r in results if r.is_numeric},
            categorical_stats={r.name: r.categories for r in results if not r.is_numeric},
            outliers={r.name: r.outliers for r in results if r.is_numeric},
            correlations=correlations,
            distributions={r.name: r.distribution for r in results if r.is_numeric},
        )

        self.logger.info(
            f"Profiling completed: {len(numeric_columns)} numeric columns, "
            f"{duplicates} duplicate rows"
        )
        return profile

    def _profile_columns(self, table: Table) -> List[ColumnResult]:
        """Run the per-column pass, keeping schema order."""
        columns = list(table.columns)

        # Typing parses dates under warnings.catch_warnings, which is not
        # thread-safe; it runs here and only the statistics go to the pool.
        data_types = {
            column: infer_column_type(table.column(column), self.sample_size,
                                      self.type_threshold)
            for column in columns
        }

        with tqdm(total=len(columns), desc="Profiling columns",
                  disable=not self.show_progress) as pbar:
            if self.max_workers == 1:
                results = []
                for column in columns:
                    results.append(self._profile_column(table, column, data_types[column]))
                    pbar.update(1)
                return results

            with futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                pending = {
                    executor.submit(self._profile_column, table, column, data_types[column]): column
                    for column in columns
                }
                by_name = {}
                for future in futures.as_completed(pending):
                    by_name[pending[future]] = future.result()
                    pbar.update(1)

        return [by_name[column] for column in columns]

    def _profile_column(self, table: Table, column: str, data_type: ColumnType) -> ColumnResult:
        """Compute the statistics for one column of an already inferred type."""
        cells = table.column(column)
        self.logger.debug(f"Column '{column}' inferred as {data_type}")

        result = ColumnResult(name=column, data_type=data_type, missing=count_missing(cells))

        if result.is_numeric:
            values = numeric_values(cells)
            result.numeric_stats = numeric_stats(values)
            result.outliers = detect_outliers(values, self.iqr_multiplier)
            result.distribution = bin_distribution(values, self.bins)
        else:
            result.categories = categorical_stats(cells, self.top_n)

        return result

    def generate_profile_summary(self, profile: DataProfile) -> str:
        """Generate a human-readable summary of the profile."""
        shape = profile.shape
        summary = (
            "\nDATA PROFILE SUMMARY\n"
            "====================\n\n"
            f"Size: {shape.rows:,} rows x {shape.columns} columns\n"
            f"Numeric columns: {len(profile.numeric_columns)}, "
            f"other columns: {len(profile.categorical_columns)}\n"
            f"Missing values: {profile.total_missing:,} ({profile.missing_percentage}% of cells)\n"
            f"Duplicate rows: {profile.duplicates:,}\n"
            f"Outliers (IQR): {profile.total_outliers:,}\n"
        )

        if profile.columns:
            summary += "\nCOLUMNS:\n"
            for column in profile.columns:
                summary += (
                    f"  - {column}: {profile.data_types[column]}, "
                    f"{profile.missing_values[column]} missing\n"
                )

        strong = profile.strong_correlations()
        if strong:
            summary += "\nSTRONG CORRELATIONS:\n"
            for col1, col2, value in strong[:5]:
                summary += f"  - {col1} / {col2}: {value:+.4f}\n"

        return summary


def analyze_data(data: TableLike, **options: Any) -> DataProfile:
    """Profile a table in one call; ``options`` go to :class:`DataProfiler`."""
    return DataProfiler(**options).profile(data)
