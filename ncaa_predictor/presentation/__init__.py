# -*- coding: utf-8 -*-
"""
Presentation Package for NCAA Predictor

Human-readable explanations of model predictions.
"""

from .explanations import generate_prediction_explanation, describe_feature

__all__ = [
    'generate_prediction_explanation',
    'describe_feature'
]
