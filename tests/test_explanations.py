#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tests for the explanations module
"""

import unittest

from ncaa_predictor.presentation.explanations import (
    describe_feature,
    generate_prediction_explanation
)


class TestExplanations(unittest.TestCase):
    """Test case for prediction explanations"""

    def setUp(self):
        self.columns = ['AdjO', 'AdjD']
        self.means = [110.0, 100.0]

    def test_starts_with_win_probability(self):
        explanation = generate_prediction_explanation(self.columns, [115.0, 90.0], self.means, 0.7234)
        self.assertTrue(explanation.startswith("The model predicts a win probability of 72.3%."))

    def test_one_sentence_per_feature_in_schema_order(self):
        explanation = generate_prediction_explanation(self.columns, [115.0, 90.0], self.means, 0.5)

        adj_o = explanation.index("The value for AdjO (115)")
        adj_d = explanation.index("The value for AdjD (90)")
        self.assertLess(adj_o, adj_d)

    def test_above_average_supports_positive_outcome(self):
        sentence = describe_feature('AdjO', 115.0, 110.0)
        self.assertIn("above the average (110.00)", sentence)
        self.assertIn("supporting a positive outcome", sentence)

    def test_value_equal_to_mean_is_not_above_average(self):
        sentence = describe_feature('AdjO', 110.0, 110.0)
        self.assertIn("below the average", sentence)
        self.assertNotIn("above the average", sentence)

    def test_input_value_is_repeated_exactly(self):
        self.assertIn("(101.12345)", describe_feature('AdjO', 101.12345, 100.0))
        self.assertIn("(1234567.5)", describe_feature('AdjO', 1234567.5, 100.0))
        self.assertIn("(0.1234567891)", describe_feature('Luck', 0.1234567891, 0.0))

    def test_below_average_may_hurt_prediction(self):
        sentence = describe_feature('AdjD', 95.5, 100.0)
        self.assertEqual(
            sentence,
            "The value for AdjD (95.5) is below the average (100.00), which may negatively impact the prediction."
        )


if __name__ == '__main__':
    unittest.main()
