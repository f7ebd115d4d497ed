# -*- coding: utf-8 -*-
"""
Feature Statistics Module

Per-feature averages over the training set, used to explain predictions.
"""

from typing import List, Sequence

import numpy as np


def calculate_feature_means(features: Sequence[Sequence[float]]) -> List[float]:
    """
    Calculate the arithmetic mean of every feature position

    Args:
        features: Feature rows of uniform length N

    Returns:
        List of N means, or an empty list when there are no rows
    """
    if len(features) == 0:
        return []
    return np.asarray(features, dtype=float).mean(axis=0).tolist()
