"""
Typed table model for the profiling engine.

Raw cell values are resolved once, at ingestion, into one of four cell kinds
(missing, text, number, boolean). Every stage downstream works on these cells
and an explicit column schema instead of re-coercing raw values.
"""

import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .config import NUMBER_PATTERN
from .exceptions import InvalidTableError


class Cell:
    """Base class for a resolved table cell."""

    kind = 'cell'
    __slots__ = ()

    @property
    def is_missing(self) -> bool:
        return False

    def as_text(self) -> Optional[str]:
        """Display string of the cell, ``None`` when missing."""
        raise NotImplementedError

    def as_number(self) -> Optional[float]:
        """Numeric reading of the cell, ``None`` when not coercible."""
        raise NotImplementedError

    def key(self) -> Tuple[str, Any]:
        """Hashable identity used for exact row comparison."""
        raise NotImplementedError


class Missing(Cell):
    """
    A cell without a value.

    ``marker`` records how the value was missing: ``'null'`` (None, NaN,
    pandas NA/NaT), ``'empty'`` (empty string) or ``'absent'`` (key not in
    the record). Every marker counts as missing; only row identity tells
    them apart.
    """

    kind = 'missing'
    __slots__ = ('marker',)

    def __init__(self, marker: str = 'null'):
        self.marker = marker

    @property
    def is_missing(self) -> bool:
        return True

    def as_text(self) -> Optional[str]:
        return None

    def as_number(self) -> Optional[float]:
        return None

    def key(self) -> Tuple[str, Any]:
        return (self.kind, self.marker)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Missing) and other.marker == self.marker

    def __hash__(self) -> int:
        return hash((self.kind, self.marker))

    def __repr__(self) -> str:
        return {'null': 'MISSING', 'empty': 'EMPTY', 'absent': 'ABSENT'}[self.marker]


MISSING = Missing('null')
EMPTY = Missing('empty')
ABSENT = Missing('absent')


@dataclass(frozen=True)
class Text(Cell):
    value: str
    kind = 'text'

    def as_text(self) -> Optional[str]:
        return self.value

    def as_number(self) -> Optional[float]:
        return parse_number(self.value)

    def key(self) -> Tuple[str, Any]:
        return (self.kind, self.value)


@dataclass(frozen=True)
class Number(Cell):
    value: float
    kind = 'number'

    def as_text(self) -> Optional[str]:
        return format_number(self.value)

    def as_number(self) -> Optional[float]:
        return self.value

    def key(self) -> Tuple[str, Any]:
        return (self.kind, self.value)


@dataclass(frozen=True)
class Boolean(Cell):
    value: bool
    kind = 'boolean'

    def as_text(self) -> Optional[str]:
        return 'true' if self.value else 'false'

    def as_number(self) -> Optional[float]:
        return 1.0 if self.value else 0.0

    def key(self) -> Tuple[str, Any]:
        return (self.kind, self.value)


def parse_number(text: str) -> Optional[float]:
    """Parse a finite decimal literal, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not NUMBER_PATTERN.match(stripped):
        return None
    value = float(stripped)
    # Literals such as 1e999 overflow to infinity
    if math.isinf(value):
        return None
    return value


def format_number(value: float) -> str:
    """Render a number the way it reads in a spreadsheet: ``2.0`` -> ``'2'``."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def to_cell(raw: Any) -> Cell:
    """Resolve a raw scalar into a typed cell."""
    if raw is None or raw is pd.NA or raw is pd.NaT:
        return MISSING
    if isinstance(raw, str):
        return Text(raw) if raw != '' else EMPTY
    if isinstance(raw, (bool, np.bool_)):
        return Boolean(bool(raw))
    if isinstance(raw, (numbers.Real, Decimal)):
        try:
            value = float(raw)
        except OverflowError:
            # Integers beyond float range keep their digits as text
            return Text(str(raw))
        if math.isnan(value):
            return MISSING
        if math.isinf(value):
            return Text('Infinity' if value > 0 else '-Infinity')
        return Number(value)
    if isinstance(raw, (datetime, date)):
        return Text(raw.isoformat())
    text = str(raw)
    return Text(text) if text != '' else EMPTY


@dataclass(frozen=True)
class Schema:
    """Ordered column names, fixed once per table."""

    columns: Tuple[str, ...]

    def index_of(self, column: str) -> int:
        try:
            return self.columns.index(column)
        except ValueError:
            raise KeyError(column) from None

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)


class Table:
    """
    Read-only table of typed cells.

    Rows are tuples aligned with the schema. Build one with
    :meth:`from_records` or :meth:`from_dataframe`.
    """

    def __init__(self, schema: Schema, rows: Sequence[Tuple[Cell, ...]]):
        self.schema = schema
        self.rows: Tuple[Tuple[Cell, ...], ...] = tuple(rows)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> 'Table':
        """
        Build a table from an ordered sequence of records.

        The schema is the key order of the first record. Keys absent from a
        later record read as missing; keys outside the schema are ignored.

        Raises:
            InvalidTableError: If the input is not a sequence of mappings
        """
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise InvalidTableError(
                f"Expected a sequence of records, got {type(records).__name__}"
            )

        records = list(records)
        if not records:
            return cls(Schema(()), ())

        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise InvalidTableError(
                    f"Record is not a mapping: {type(record).__name__}", index
                )

        columns = tuple(records[0].keys())
        for column in columns:
            if not isinstance(column, str):
                raise InvalidTableError(f"Column name is not a string: {column!r}", 0)

        rows = [
            tuple(
                to_cell(record[column]) if column in record else ABSENT
                for column in columns
            )
            for record in records
        ]
        return cls(Schema(columns), rows)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'Table':
        """Build a table from a pandas DataFrame, keeping its column order."""
        columns = tuple(str(column) for column in df.columns)
        if len(set(columns)) != len(columns):
            raise InvalidTableError(f"Duplicate column names: {list(columns)}")
        if len(df) == 0:
            return cls(Schema(()), ())

        rows = [
            tuple(to_cell(value) for value in row)
            for row in df.itertuples(index=False, name=None)
        ]
        return cls(Schema(columns), rows)

    @property
    def columns(self) -> Tuple[str, ...]:
        return self.schema.columns

    def column(self, name: str) -> Tuple[Cell, ...]:
        """All cells of one column, in row order."""
        index = self.schema.index_of(name)
        return tuple(row[index] for row in self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Table(rows={len(self.rows)}, columns={list(self.schema.columns)})"


def as_table(data: Union[Table, pd.DataFrame, Iterable[Mapping[str, Any]]]) -> Table:
    """Accept a table, a DataFrame or a sequence of records."""
    if isinstance(data, Table):
        return data
    if isinstance(data, pd.DataFrame):
        return Table.from_dataframe(data)
    return Table.from_records(data)
