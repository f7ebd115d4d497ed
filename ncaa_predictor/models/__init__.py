# -*- coding: utf-8 -*-
"""
Models Package for NCAA Predictor

This package contains the neural network wrapper, the training service that
owns the live model, and the prediction logic built on top of it.
"""

from .network import BinaryClassifierNetwork, build_model
from .trainer import ModelService, ModelState, TrainedState, TrainingSummary
from .predictor import PredictionResult, classify_probability, predict_outcome

__all__ = [
    # Network
    'BinaryClassifierNetwork',
    'build_model',

    # Training
    'ModelService',
    'ModelState',
    'TrainedState',
    'TrainingSummary',

    # Prediction
    'PredictionResult',
    'classify_probability',
    'predict_outcome'
]
