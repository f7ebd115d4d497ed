#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Features Package for NCAA Predictor

This package contains the training-set statistics used to explain predictions.
"""

from .statistics import calculate_feature_means

__all__ = [
    'calculate_feature_means'
]
