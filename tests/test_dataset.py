#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tests for the dataset loading module
"""

import os
import shutil
import tempfile
import unittest

import numpy as np

from ncaa_predictor.data.dataset import (
    apply_row_policy,
    filter_seasons,
    list_available_features,
    load_dataset
)
from ncaa_predictor.exceptions import DatasetError

FEATURES = ['AdjO', 'AdjD', 'AdjT']

SAMPLE_CSV = """Season,Team,AdjO,AdjD,AdjT,Win
2019,Duke,120.1,92.3,70.1,1
2019,Kansas,115.4,95.0,68.9,1
2020,Iowa,118.0,101.2,,0
2021,Gonzaga,125.2,94.4,72.8,1
2021,Navy,99.5,106.7,n/a,0
"""


class TestLoadDataset(unittest.TestCase):
    """Test case for load_dataset"""

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = self._write("games.csv", SAMPLE_CSV)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def _write(self, name, content):
        path = os.path.join(self.tmp_dir, name)
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_rows_and_labels_line_up(self):
        """Every input row gives one feature row of schema width and one label"""
        dataset = load_dataset(self.path, FEATURES, 'Win')

        self.assertEqual(dataset.features.shape, (5, 3))
        self.assertEqual(len(dataset.labels), 5)
        self.assertEqual(len(dataset), 5)
        np.testing.assert_array_equal(dataset.labels, [1, 1, 0, 1, 0])
        np.testing.assert_allclose(dataset.features[0], [120.1, 92.3, 70.1])

    def test_feature_order_follows_schema(self):
        dataset = load_dataset(self.path, ['AdjT', 'AdjO'], 'Win')
        np.testing.assert_allclose(dataset.features[0], [70.1, 120.1])

    def test_unparseable_cells_become_nan(self):
        dataset = load_dataset(self.path, FEATURES, 'Win')

        self.assertTrue(np.isnan(dataset.features[2, 2]))
        self.assertTrue(np.isnan(dataset.features[4, 2]))
        self.assertFalse(np.isnan(dataset.features[3]).any())

    def test_missing_column_becomes_nan(self):
        dataset = load_dataset(self.path, ['AdjO', 'Luck'], 'Win')
        self.assertTrue(np.isnan(dataset.features[:, 1]).all())

    def test_seasons_loaded_when_requested(self):
        dataset = load_dataset(self.path, FEATURES, 'Win', season_column='Season')
        np.testing.assert_array_equal(dataset.seasons, [2019, 2019, 2020, 2021, 2021])

    def test_header_only_file_gives_no_rows(self):
        path = self._write("empty_rows.csv", "Season,AdjO,AdjD,AdjT,Win\n")
        dataset = load_dataset(path, FEATURES, 'Win')

        self.assertEqual(dataset.features.shape, (0, 3))
        self.assertEqual(len(dataset.labels), 0)

    def test_missing_file_raises(self):
        with self.assertRaises(DatasetError):
            load_dataset(os.path.join(self.tmp_dir, "missing.csv"), FEATURES, 'Win')

    def test_empty_file_raises(self):
        path = self._write("empty.csv", "")
        with self.assertRaises(DatasetError):
            load_dataset(path, FEATURES, 'Win')


class TestRowPolicy(unittest.TestCase):
    """Test case for apply_row_policy"""

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        path = os.path.join(self.tmp_dir, "games.csv")
        with open(path, "w") as f:
            f.write(SAMPLE_CSV)
        self.dataset = load_dataset(path, FEATURES, 'Win', season_column='Season')

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_drop_removes_invalid_rows(self):
        dataset = apply_row_policy(self.dataset, "drop")

        self.assertEqual(len(dataset), 3)
        self.assertFalse(np.isnan(dataset.features).any())
        np.testing.assert_array_equal(dataset.seasons, [2019, 2019, 2021])

    def test_error_names_row_and_column(self):
        with self.assertRaises(DatasetError) as ctx:
            apply_row_policy(self.dataset, "error")
        self.assertIn("row 4", str(ctx.exception))
        self.assertIn("AdjT", str(ctx.exception))

    def test_keep_passes_rows_through(self):
        dataset = apply_row_policy(self.dataset, "keep")
        self.assertEqual(len(dataset), 5)
        self.assertTrue(np.isnan(dataset.features).any())

    def test_drop_with_nothing_left_raises(self):
        bad = self.dataset.subset(np.array([False, False, True, False, True]))
        with self.assertRaises(DatasetError):
            apply_row_policy(bad, "drop")

    def test_non_binary_label_raises(self):
        tmp = os.path.join(self.tmp_dir, "labels.csv")
        with open(tmp, "w") as f:
            f.write("AdjO,AdjD,AdjT,Win\n1,2,3,1\n4,5,6,2\n")
        dataset = load_dataset(tmp, FEATURES, 'Win')
        with self.assertRaises(DatasetError):
            apply_row_policy(dataset, "drop")

    def test_unknown_policy_raises(self):
        with self.assertRaises(DatasetError):
            apply_row_policy(self.dataset, "ignore")


class TestSeasonsAndFeatures(unittest.TestCase):
    """Test case for season filtering and the feature catalogue"""

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, "games.csv")
        with open(self.path, "w") as f:
            f.write(SAMPLE_CSV)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_filter_seasons_is_inclusive(self):
        dataset = load_dataset(self.path, FEATURES, 'Win', season_column='Season')
        filtered = filter_seasons(dataset, 2020, 2021)

        self.assertEqual(len(filtered), 3)
        np.testing.assert_array_equal(filtered.seasons, [2020, 2021, 2021])

    def test_filter_without_season_column_raises(self):
        dataset = load_dataset(self.path, FEATURES, 'Win')
        with self.assertRaises(DatasetError):
            filter_seasons(dataset, 2019, 2020)

    def test_list_available_features_skips_text_and_excluded(self):
        features = list_available_features(self.path, exclude=['Win', 'Season'])
        self.assertEqual(features, ['AdjO', 'AdjD', 'AdjT'])


if __name__ == '__main__':
    unittest.main()
