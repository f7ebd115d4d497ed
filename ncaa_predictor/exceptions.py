# -*- coding: utf-8 -*-
"""
Exceptions Module

Error kinds raised by the training and prediction pipeline. Each carries the
HTTP status code the API layer answers with.
"""


class PredictorError(Exception):
    """Base class for all pipeline errors"""
    status_code = 500


class ConfigError(PredictorError):
    """Exception raised for an invalid configuration"""
    pass


class DatasetError(PredictorError):
    """Exception raised when the dataset cannot be read or parsed"""
    pass


class TrainingError(PredictorError):
    """Exception raised when a training run fails"""
    pass


class TrainingInProgressError(PredictorError):
    """Exception raised when a training run is requested while another is running"""
    status_code = 409


class ModelNotTrainedError(PredictorError):
    """Exception raised when a prediction is requested before any training"""
    status_code = 400


class ValidationError(PredictorError):
    """Exception raised for a missing or non-numeric input value"""
    status_code = 400

    def __init__(self, message, feature=None):
        super().__init__(message)
        self.feature = feature


class PredictionError(PredictorError):
    """Exception raised for an unexpected failure during the forward pass"""
    pass
