"""
Unit tests for type_inference.py
"""

import unittest

from tabular_profiler.config import TYPE_SAMPLE_SIZE, TYPE_THRESHOLD
from tabular_profiler.models import ColumnType
from tabular_profiler.table import MISSING, Boolean, Number, to_cell
from tabular_profiler.type_inference import (
    classify_value, count_sample_types, infer_column_type, looks_like_date
)


def cells(*values):
    return [to_cell(value) for value in values]


class TestClassifyValue(unittest.TestCase):
    """Test cases for single value classification."""

    def test_boolean_tokens(self):
        for text in ('true', 'FALSE', 'Yes', 'no', '0', '1'):
            self.assertEqual(classify_value(text), 'boolean', text)

    def test_numeric(self):
        for text in ('2', '-3.25', '1e3', '.5'):
            self.assertEqual(classify_value(text), 'numeric', text)

    def test_dates(self):
        for text in ('2024-01-31', '12/31/2023', '12-31-2023', '2024-01-31T10:00:00'):
            self.assertEqual(classify_value(text), 'datetime', text)

    def test_unclassified(self):
        for text in ('apple', 'N/A', ''):
            self.assertEqual(classify_value(text), '', text)

    def test_text_without_digits_is_not_a_date(self):
        self.assertFalse(looks_like_date('hello'))
        self.assertFalse(looks_like_date('x'))


class TestInferColumnType(unittest.TestCase):
    """Test cases for column type inference."""

    def test_all_missing_is_unknown(self):
        self.assertEqual(infer_column_type([MISSING, MISSING]), ColumnType.UNKNOWN)
        self.assertEqual(infer_column_type([]), ColumnType.UNKNOWN)

    def test_numeric_column(self):
        self.assertEqual(infer_column_type(cells('10', '20.5', None, '-3')), ColumnType.NUMERIC)

    def test_numeric_cells(self):
        self.assertEqual(infer_column_type([Number(2.5), Number(3.5)]), ColumnType.NUMERIC)

    def test_small_integers_with_boolean_tokens_are_numeric(self):
        """'1' is claimed as boolean, but the column still reads as numeric."""
        self.assertEqual(infer_column_type(cells('1', '2', '2')), ColumnType.NUMERIC)
        self.assertEqual(infer_column_type(cells(1, 2, 3, 4, 100)), ColumnType.NUMERIC)

    def test_zero_one_column_is_boolean(self):
        self.assertEqual(infer_column_type(cells('0', '1', '1', '0')), ColumnType.BOOLEAN)
        self.assertEqual(infer_column_type(cells(0, 1, 1, 0, 1)), ColumnType.BOOLEAN)

    def test_boolean_words(self):
        self.assertEqual(infer_column_type(cells('yes', 'no', 'Yes')), ColumnType.BOOLEAN)
        self.assertEqual(infer_column_type([Boolean(True), Boolean(False)]), ColumnType.BOOLEAN)

    def test_datetime_column(self):
        column = cells('2024-01-01', '2024-02-15', '03/15/2024', '2024-04-01')
        self.assertEqual(infer_column_type(column), ColumnType.DATETIME)

    def test_mixed_column_is_categorical(self):
        self.assertEqual(infer_column_type(cells('apple', '3', 'banana', '4')), ColumnType.CATEGORICAL)

    def test_threshold_is_strict(self):
        """Exactly 80% numeric is not enough."""
        column = cells('10', '20', '30', '40', 'abc')
        self.assertEqual(TYPE_THRESHOLD, 0.8)
        self.assertEqual(infer_column_type(column), ColumnType.CATEGORICAL)
        self.assertEqual(infer_column_type(column, threshold=0.7), ColumnType.NUMERIC)

    def test_just_above_threshold(self):
        column = cells(*(['7'] * 9 + ['abc']))
        self.assertEqual(infer_column_type(column), ColumnType.NUMERIC)

    def test_sample_is_capped(self):
        """Only the first non-missing values are inspected."""
        column = cells(*(['5'] * TYPE_SAMPLE_SIZE + ['word'] * 200))
        self.assertEqual(infer_column_type(column), ColumnType.NUMERIC)
        self.assertEqual(infer_column_type(column, sample_size=300), ColumnType.CATEGORICAL)

    def test_missing_cells_do_not_use_the_sample(self):
        column = [MISSING] * 50 + cells('1.5', '2.5')
        counts = count_sample_types(column, sample_size=2)
        self.assertEqual(counts['total'], 2)
        self.assertEqual(counts['numeric'], 2)

    def test_values_are_trimmed(self):
        self.assertEqual(infer_column_type(cells(' 42 ', ' 43', '44 ')), ColumnType.NUMERIC)


if __name__ == '__main__':
    unittest.main(verbosity=2)
