# -*- coding: utf-8 -*-
"""
Prediction Module

Turns a request's feature values into a win prediction with an explanation,
using the model snapshot installed by the last successful training run.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..data.validation import validate_feature_input
from ..exceptions import ModelNotTrainedError, PredictionError
from ..presentation.explanations import generate_prediction_explanation
from .network import DECISION_THRESHOLD
from .trainer import TrainedState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredictionResult:
    predicted_class: int
    prediction_probability: float
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'predictedClass': self.predicted_class,
            'predictionProbability': self.prediction_probability,
            'explanation': self.explanation
        }


def classify_probability(probability: float) -> int:
    """Map a win probability to a class label, 0.5 and above is a win"""
    return 1 if probability >= DECISION_THRESHOLD else 0


def predict_outcome(state: Optional[TrainedState], payload: Any) -> PredictionResult:
    """
    Predict the outcome for one set of feature values

    Args:
        state: Trained state snapshot, None when no model has been trained
        payload: Mapping of feature name to numeric value

    Returns:
        PredictionResult with class, probability and explanation

    Raises:
        ModelNotTrainedError: If no model has been trained yet
        ValidationError: If a feature value is missing or non-numeric
        PredictionError: If the forward pass fails
    """
    if state is None:
        raise ModelNotTrainedError("Model is not trained yet. Please trigger /train first.")

    input_values = validate_feature_input(payload, state.feature_columns)

    try:
        probability = state.model.predict_probability(input_values)
    except Exception as e:
        logger.error(f"Prediction error: {str(e)}")
        raise PredictionError("Prediction failed.") from e

    predicted_class = classify_probability(probability)
    explanation = generate_prediction_explanation(
        state.feature_columns, input_values, state.feature_means, probability
    )
    logger.debug(f"Predicted class {predicted_class} with probability {probability:.4f}")

    return PredictionResult(
        predicted_class=predicted_class,
        prediction_probability=probability,
        explanation=explanation
    )
