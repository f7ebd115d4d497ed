#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Explanations Module

This module generates natural language explanations for win predictions by
comparing each input statistic with its average over the training data.
"""

import logging
from typing import List, Sequence

# Configure logger
logger = logging.getLogger(__name__)


def _format_value(value: float) -> str:
    # Whole numbers print without a trailing ".0", as the request sent them
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def describe_feature(name: str, value: float, mean: float) -> str:
    """
    Describe one input feature relative to its training average

    A value exactly equal to the average counts as below average.
    """
    if value > mean:
        return (f"The value for {name} ({_format_value(value)}) is above the average "
                f"({mean:.2f}), supporting a positive outcome.")
    return (f"The value for {name} ({_format_value(value)}) is below the average "
            f"({mean:.2f}), which may negatively impact the prediction.")


def generate_prediction_explanation(feature_columns: Sequence[str], input_values: Sequence[float],
                                    feature_means: Sequence[float], win_prob: float) -> str:
    """
    Generate a natural language explanation of a prediction

    Args:
        feature_columns: Feature names in schema order
        input_values: Input value for every feature, same order
        feature_means: Training-set mean for every feature, same order
        win_prob: Predicted win probability in [0, 1]

    Returns:
        str: Explanation starting with the win probability, followed by one
        sentence per feature
    """
    parts: List[str] = [f"The model predicts a win probability of {win_prob * 100:.1f}%."]
    for name, value, mean in zip(feature_columns, input_values, feature_means):
        parts.append(describe_feature(name, value, mean))
    return " ".join(parts)
