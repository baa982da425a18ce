"""
Unit tests for profiling_module.py
"""

import dataclasses
import json
import unittest
import warnings

import numpy as np
import pandas as pd

from tabular_profiler.config import EMPTY_LABEL
from tabular_profiler.exceptions import InvalidTableError
from tabular_profiler.models import CategoryCount, ColumnType, DataProfile, OutlierInfo, Shape
from tabular_profiler.profiling_module import DataProfiler, analyze_data


class TestEmptyTable(unittest.TestCase):
    """Test cases for the empty table profile."""

    def test_empty_records(self):
        profile = analyze_data([])

        self.assertEqual(profile.shape, Shape(0, 0))
        self.assertEqual(profile.columns, ())
        self.assertEqual(profile.duplicates, 0)
        for mapping in (profile.data_types, profile.missing_values, profile.numeric_stats,
                        profile.categorical_stats, profile.outliers, profile.correlations,
                        profile.distributions):
            self.assertEqual(len(mapping), 0)

    def test_empty_dataframe(self):
        profile = analyze_data(pd.DataFrame({'a': []}))
        self.assertEqual(profile.to_dict(), DataProfile.empty().to_dict())

    def test_empty_to_dict(self):
        self.assertEqual(analyze_data([]).to_dict(), {
            'shape': {'rows': 0, 'columns': 0},
            'columns': [],
            'dataTypes': {},
            'missingValues': {},
            'duplicates': 0,
            'numericStats': {},
            'categoricalStats': {},
            'outliers': {},
            'correlations': {},
            'distributions': {},
        })


class TestDataProfiler(unittest.TestCase):
    """Test cases for DataProfiler."""

    def setUp(self):
        self.records = [
            {'id': 1, 'price': '10.5', 'city': 'Paris', 'joined': '2024-01-01', 'active': 'yes'},
            {'id': 2, 'price': '12.0', 'city': 'Lyon', 'joined': '2024-02-01', 'active': 'no'},
            {'id': 3, 'price': '', 'city': 'Paris', 'joined': '2024-03-01', 'active': 'yes'},
            {'id': 4, 'price': '11.25', 'city': None, 'joined': '2024-04-01', 'active': 'yes'},
            {'id': 5, 'price': '95', 'city': 'Nice', 'joined': '2024-05-01', 'active': 'no'},
            {'id': 6, 'price': '13', 'city': 'Paris', 'joined': '2024-06-01', 'active': 'no'},
        ]
        self.profiler = DataProfiler()

    def test_small_table(self):
        """Numeric, categorical and duplicate results on a three-row table."""
        profile = analyze_data([
            {'a': '1', 'b': 'x'},
            {'a': '2', 'b': 'y'},
            {'a': '2', 'b': 'y'},
        ])

        self.assertEqual(profile.data_types['a'], ColumnType.NUMERIC)
        self.assertEqual(profile.numeric_stats['a'].count, 3)
        self.assertEqual(profile.numeric_stats['a'].mean, 1.6667)
        self.assertEqual(profile.data_types['b'], ColumnType.CATEGORICAL)
        self.assertEqual(profile.categorical_stats['b'][0], CategoryCount('y', 2, 66.67))
        self.assertEqual(profile.duplicates, 1)

    def test_outlier_column(self):
        profile = analyze_data([{'v': v} for v in [1, 2, 3, 4, 100]])

        self.assertEqual(profile.data_types['v'], ColumnType.NUMERIC)
        self.assertEqual(profile.numeric_stats['v'].q25, 2.0)
        self.assertEqual(profile.numeric_stats['v'].q75, 4.0)
        self.assertEqual(profile.outliers['v'], OutlierInfo(1, 20.0, -1.0, 7.0))

    def test_shape_and_columns(self):
        profile = self.profiler.profile(self.records)

        self.assertEqual(profile.shape, Shape(rows=6, columns=5))
        self.assertEqual(profile.columns, ('id', 'price', 'city', 'joined', 'active'))

    def test_types_route_statistics(self):
        profile = self.profiler.profile(self.records)

        self.assertEqual(dict(profile.data_types), {
            'id': ColumnType.NUMERIC,
            'price': ColumnType.NUMERIC,
            'city': ColumnType.CATEGORICAL,
            'joined': ColumnType.DATETIME,
            'active': ColumnType.BOOLEAN,
        })
        self.assertEqual(set(profile.numeric_stats), {'id', 'price'})
        self.assertEqual(set(profile.outliers), {'id', 'price'})
        self.assertEqual(set(profile.distributions), {'id', 'price'})
        self.assertEqual(set(profile.categorical_stats), {'city', 'joined', 'active'})
        self.assertEqual(list(profile.correlations), ['id', 'price'])

    def test_missing_values(self):
        profile = self.profiler.profile(self.records)

        self.assertEqual(profile.missing_values['price'], 1)
        self.assertEqual(profile.missing_values['city'], 1)
        self.assertEqual(profile.missing_values['id'], 0)
        self.assertEqual(profile.numeric_stats['price'].count, 5)
        self.assertIn(CategoryCount(EMPTY_LABEL, 1, 16.67), profile.categorical_stats['city'])

    def test_numeric_invariants(self):
        profile = self.profiler.profile(self.records)

        for column, stats in profile.numeric_stats.items():
            self.assertLessEqual(stats.min, stats.q25)
            self.assertLessEqual(stats.q25, stats.median)
            self.assertLessEqual(stats.median, stats.q75)
            self.assertLessEqual(stats.q75, stats.max)
            bins = profile.distributions[column]
            self.assertEqual(len(bins), 10)
            self.assertEqual(sum(b.count for b in bins), stats.count)
            outliers = profile.outliers[column]
            self.assertLessEqual(outliers.lower_bound, outliers.upper_bound)

        self.assertEqual(profile.outliers['price'].count, 1)

    def test_correlation_matrix(self):
        profile = self.profiler.profile(self.records)
        corr = profile.correlations

        self.assertEqual(corr['id']['id'], 1.0)
        self.assertEqual(corr['price']['price'], 1.0)
        self.assertEqual(corr['id']['price'], corr['price']['id'])

    def test_all_missing_column(self):
        profile = analyze_data([{'a': 1, 'b': None}, {'a': 2, 'b': ''}])

        self.assertEqual(profile.data_types['b'], ColumnType.UNKNOWN)
        self.assertEqual(profile.missing_values['b'], 2)
        self.assertEqual(profile.categorical_stats['b'], (CategoryCount(EMPTY_LABEL, 2, 100.0),))
        self.assertNotIn('b', profile.numeric_stats)

    def test_dataframe_input(self):
        df = pd.DataFrame({'x': [1.0, 2.0, np.nan, 4.0], 'label': ['a', 'b', 'a', None]})
        profile = self.profiler.profile(df)

        self.assertEqual(profile.shape, Shape(4, 2))
        self.assertEqual(profile.missing_values['x'], 1)
        self.assertEqual(profile.numeric_stats['x'].count, 3)
        self.assertEqual(profile.categorical_stats['label'][0], CategoryCount('a', 2, 50.0))

    def test_profile_is_read_only(self):
        profile = self.profiler.profile(self.records)

        with self.assertRaises(TypeError):
            profile.data_types['id'] = ColumnType.CATEGORICAL
        with self.assertRaises(TypeError):
            profile.correlations['id']['price'] = 0.5
        with self.assertRaises(dataclasses.FrozenInstanceError):
            profile.duplicates = 10

    def test_profile_does_not_track_input(self):
        profile = self.profiler.profile(self.records)
        self.records[0]['city'] = 'Lille'
        self.records.append(dict(self.records[1]))

        self.assertEqual(profile.shape.rows, 6)
        self.assertEqual(profile.categorical_stats['city'][0].value, 'Paris')

    def test_parallel_matches_sequential(self):
        sequential = DataProfiler().profile(self.records)
        parallel = DataProfiler(max_workers=4).profile(self.records)
        self.assertEqual(parallel.to_dict(), sequential.to_dict())

    def test_parallel_run_keeps_warning_filters(self):
        """A threaded run leaves the caller's warning filters as they were."""
        records = [
            {f'c{i}': f'{day} Jan 2010' for i in range(32)}
            for day in range(1, 9)
        ]
        before = list(warnings.filters)
        for _ in range(3):
            profile = DataProfiler(max_workers=8).profile(records)
            self.assertEqual(list(warnings.filters), before)
        self.assertEqual(profile.data_types['c0'], ColumnType.DATETIME)

    def test_huge_integer_is_profiled(self):
        profile = analyze_data([{'a': 10 ** 400}, {'a': 1}])

        self.assertEqual(profile.data_types['a'], ColumnType.CATEGORICAL)
        self.assertEqual(profile.missing_values['a'], 0)
        self.assertEqual(profile.categorical_stats['a'][0].value, str(10 ** 400))

    def test_extreme_values_give_standard_json(self):
        profile = analyze_data([{'v': v, 'w': i} for i, v in enumerate([-1e308, 5, 1e308, 7])])

        self.assertEqual(profile.data_types['v'], ColumnType.NUMERIC)
        json.dumps(profile.to_dict(), allow_nan=False)

    def test_options(self):
        profile = analyze_data(self.records, bins=5, top_n=2)

        self.assertEqual(len(profile.distributions['id']), 5)
        self.assertEqual(len(profile.categorical_stats['city']), 2)

    def test_invalid_input(self):
        with self.assertRaises(InvalidTableError):
            analyze_data(42)
        with self.assertRaises(InvalidTableError):
            analyze_data(['not a record'])

    def test_to_dict_is_json_ready(self):
        data = self.profiler.profile(self.records).to_dict()
        decoded = json.loads(json.dumps(data))

        self.assertEqual(decoded['shape'], {'rows': 6, 'columns': 5})
        self.assertEqual(decoded['dataTypes']['joined'], 'datetime')
        self.assertEqual(set(decoded['outliers']['price']),
                         {'count', 'percentage', 'lowerBound', 'upperBound'})
        self.assertEqual(set(decoded['distributions']['id'][0]), {'bin', 'count'})
        self.assertEqual(set(decoded['numericStats']['id']),
                         {'count', 'mean', 'std', 'min', 'q25', 'median', 'q75', 'max'})


class TestProfileSummary(unittest.TestCase):
    """Test cases for derived profile figures."""

    def setUp(self):
        self.profile = analyze_data([
            {'x': 1, 'y': 2, 'z': 'a'},
            {'x': 2, 'y': 4, 'z': None},
            {'x': 3, 'y': 6, 'z': 'b'},
            {'x': 4, 'y': None, 'z': 'b'},
        ])

    def test_totals(self):
        self.assertEqual(self.profile.total_missing, 2)
        self.assertEqual(self.profile.missing_percentage, 16.7)
        self.assertEqual(self.profile.total_outliers, 0)
        self.assertEqual(self.profile.numeric_columns, ('x', 'y'))
        self.assertEqual(self.profile.categorical_columns, ('z',))

    def test_strong_correlations(self):
        self.assertEqual(self.profile.strong_correlations(), [('x', 'y', 1.0)])
        self.assertEqual(analyze_data([]).strong_correlations(), [])

    def test_summary_text(self):
        summary = DataProfiler().generate_profile_summary(self.profile)
        self.assertIn('4 rows x 3 columns', summary)
        self.assertIn('Duplicate rows: 0', summary)
        self.assertIn('x / y', summary)


if __name__ == '__main__':
    unittest.main(verbosity=2)
