#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tests for the neural network wrapper
"""

import unittest
from unittest.mock import MagicMock

import numpy as np

from ncaa_predictor.models.network import BinaryClassifierNetwork, build_model


class TestBuildModel(unittest.TestCase):

    def test_topology(self):
        model = build_model(5)

        self.assertIsInstance(model, BinaryClassifierNetwork)
        self.assertEqual(model.input_size, 5)
        self.assertEqual(model.estimator.hidden_layer_sizes, (16, 8))
        self.assertEqual(model.estimator.activation, 'relu')
        self.assertEqual(model.estimator.solver, 'adam')
        self.assertFalse(model.fitted)

    def test_invalid_input_size(self):
        with self.assertRaises(ValueError):
            build_model(0)


class TestBinaryClassifierNetwork(unittest.TestCase):
    """Test case for fitting and predicting"""

    def setUp(self):
        rng = np.random.RandomState(42)
        self.X = rng.rand(50, 3)
        self.y = (self.X[:, 0] > 0.5).astype(float)
        self.model = build_model(3)

    def test_fit_records_every_epoch(self):
        callback = MagicMock()
        history = self.model.fit(self.X, self.y, epochs=5, batch_size=16,
                                 validation_split=0.2, on_epoch_end=callback)

        self.assertEqual(len(history), 5)
        self.assertEqual(callback.call_count, 5)
        self.assertEqual(callback.call_args_list[0][0][0], 1)
        for metrics in history:
            self.assertGreaterEqual(metrics['accuracy'], 0.0)
            self.assertLessEqual(metrics['accuracy'], 1.0)
            self.assertIsNotNone(metrics['val_loss'])
            self.assertIsNotNone(metrics['val_accuracy'])
        self.assertTrue(self.model.fitted)

    def test_no_validation_split(self):
        history = self.model.fit(self.X, self.y, epochs=2, batch_size=16)
        self.assertIsNone(history[-1]['val_loss'])
        self.assertIsNone(history[-1]['val_accuracy'])

    def test_predict_probability_is_deterministic(self):
        self.model.fit(self.X, self.y, epochs=3, batch_size=16, validation_split=0.2)

        first = self.model.predict_probability([0.9, 0.1, 0.4])
        second = self.model.predict_probability([0.9, 0.1, 0.4])
        self.assertEqual(first, second)
        self.assertGreaterEqual(first, 0.0)
        self.assertLessEqual(first, 1.0)

    def test_fitted_network_cannot_be_refitted(self):
        self.model.fit(self.X, self.y, epochs=1, batch_size=16)
        with self.assertRaises(ValueError):
            self.model.fit(self.X, self.y, epochs=1, batch_size=16)

    def test_wrong_feature_width(self):
        with self.assertRaises(ValueError):
            self.model.fit(self.X[:, :2], self.y, epochs=1, batch_size=16)

        self.model.fit(self.X, self.y, epochs=1, batch_size=16)
        with self.assertRaises(ValueError):
            self.model.predict_probability([0.1, 0.2])

    def test_predict_before_fit(self):
        with self.assertRaises(ValueError):
            self.model.predict_probability([0.1, 0.2, 0.3])

    def test_nan_features_are_rejected(self):
        X = self.X.copy()
        X[3, 1] = np.nan
        with self.assertRaises(ValueError):
            self.model.fit(X, self.y, epochs=1, batch_size=16)

    def test_summary(self):
        self.model.fit(self.X, self.y, epochs=2, batch_size=16)
        summary = self.model.summary()
        self.assertEqual(summary['hidden_layers'], [16, 8])
        self.assertEqual(summary['epochs_trained'], 2)


if __name__ == '__main__':
    unittest.main()
