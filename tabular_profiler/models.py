"""Result types produced by the profiling engine."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .config import HIGH_CORRELATION_THRESHOLD


class ColumnType(str, Enum):
    NUMERIC = 'numeric'
    CATEGORICAL = 'categorical'
    DATETIME = 'datetime'
    BOOLEAN = 'boolean'
    UNKNOWN = 'unknown'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericStats:
    count: int = 0
    mean: float = 0.0
    std: float = 0.0
    min: float = 0.0
    q25: float = 0.0
    median: float = 0.0
    q75: float = 0.0
    max: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': self.count,
            'mean': self.mean,
            'std': self.std,
            'min': self.min,
            'q25': self.q25,
            'median': self.median,
            'q75': self.q75,
            'max': self.max,
        }


@dataclass(frozen=True)
class CategoryCount:
    value: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {'value': self.value, 'count': self.count, 'percentage': self.percentage}


@dataclass(frozen=True)
class OutlierInfo:
    count: int = 0
    percentage: float = 0.0
    lower_bound: float = 0.0
    upper_bound: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': self.count,
            'percentage': self.percentage,
            'lowerBound': self.lower_bound,
            'upperBound': self.upper_bound,
        }


@dataclass(frozen=True)
class DistributionBin:
    label: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'bin': self.label, 'count': self.count}


@dataclass(frozen=True)
class Shape:
    rows: int = 0
    columns: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'rows': self.rows, 'columns': self.columns}


CorrelationMatrix = Mapping[str, Mapping[str, float]]


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class DataProfile:
    """
    Read-only statistical profile of one table.

    Maps are exposed as ``MappingProxyType`` and sequences as tuples, so the
    profile can be handed to several consumers without defensive copies.
    """

    shape: Shape
    columns: Tuple[str, ...]
    data_types: Mapping[str, ColumnType]
    missing_values: Mapping[str, int]
    duplicates: int
    numeric_stats: Mapping[str, NumericStats]
    categorical_stats: Mapping[str, Tuple[CategoryCount, ...]]
    outliers: Mapping[str, OutlierInfo]
    correlations: CorrelationMatrix
    distributions: Mapping[str, Tuple[DistributionBin, ...]]

    @classmethod
    def build(cls,
              columns: List[str],
              row_count: int,
              data_types: Dict[str, ColumnType],
              missing_values: Dict[str, int],
              duplicates: int,
              numeric_stats: Dict[str, NumericStats],
              categorical_stats: Dict[str, List[CategoryCount]],
              outliers: Dict[str, OutlierInfo],
              correlations: Dict[str, Dict[str, float]],
              distributions: Dict[str, List[DistributionBin]]) -> 'DataProfile':
        """Freeze freshly computed results into a profile."""
        return cls(
            shape=Shape(rows=row_count, columns=len(columns)),
            columns=tuple(columns),
            data_types=_frozen(data_types),
            missing_values=_frozen(missing_values),
            duplicates=duplicates,
            numeric_stats=_frozen(numeric_stats),
            categorical_stats=_frozen({k: tuple(v) for k, v in categorical_stats.items()}),
            outliers=_frozen(outliers),
            correlations=_frozen({k: _frozen(v) for k, v in correlations.items()}),
            distributions=_frozen({k: tuple(v) for k, v in distributions.items()}),
        )

    @classmethod
    def empty(cls) -> 'DataProfile':
        return cls.build([], 0, {}, {}, 0, {}, {}, {}, {}, {})

    @property
    def total_missing(self) -> int:
        return sum(self.missing_values.values())

    @property
    def missing_percentage(self) -> float:
        """Share of all cells that are missing, in percent (1 decimal)."""
        cells = self.shape.rows * self.shape.columns
        if cells == 0:
            return 0.0
        return round(self.total_missing / cells * 100, 1)

    @property
    def total_outliers(self) -> int:
        return sum(info.count for info in self.outliers.values())

    @property
    def numeric_columns(self) -> Tuple[str, ...]:
        return tuple(c for c in self.columns if self.data_types[c] == ColumnType.NUMERIC)

    @property
    def categorical_columns(self) -> Tuple[str, ...]:
        return tuple(c for c in self.columns if self.data_types[c] != ColumnType.NUMERIC)

    def strong_correlations(self,
                            threshold: float = HIGH_CORRELATION_THRESHOLD) -> List[Tuple[str, str, float]]:
        """Distinct column pairs with ``|r| >= threshold``, strongest first."""
        columns = list(self.correlations)
        pairs = []
        for i, col1 in enumerate(columns):
            for col2 in columns[i + 1:]:
                value = self.correlations[col1][col2]
                if abs(value) >= threshold:
                    pairs.append((col1, col2, value))
        return sorted(pairs, key=lambda pair: abs(pair[2]), reverse=True)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready dictionary using the consumer-facing key names."""
        return {
            'shape': self.shape.to_dict(),
            'columns': list(self.columns),
            'dataTypes': {k: v.value for k, v in self.data_types.items()},
            'missingValues': dict(self.missing_values),
            'duplicates': self.duplicates,
            'numericStats': {k: v.to_dict() for k, v in self.numeric_stats.items()},
            'categoricalStats': {
                k: [item.to_dict() for item in v] for k, v in self.categorical_stats.items()
            },
            'outliers': {k: v.to_dict() for k, v in self.outliers.items()},
            'correlations': {k: dict(v) for k, v in self.correlations.items()},
            'distributions': {
                k: [item.to_dict() for item in v] for k, v in self.distributions.items()
            },
        }
