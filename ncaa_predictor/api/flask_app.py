"""
Flask App Module for NCAA Predictor

This module provides the REST API of the prediction service.

Endpoints include:
- /health - Health check endpoint
- /config - Configured feature columns
- /features - Numeric columns available in the dataset
- /status - Whether a model has been trained
- /train - Train a new model, optionally on a season range
- /predict - Predict the outcome for one set of feature values

Every failure is answered with a JSON object carrying an "error" field.
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ..data.validation import validate_season_range
from ..exceptions import PredictorError
from ..models.predictor import predict_outcome
from ..models.trainer import ModelService
from ..utils.config import get_default_config

logger = logging.getLogger(__name__)


def get_service() -> ModelService:
    """Return the model service bound to the current app"""
    return current_app.extensions['model_service']


def create_app(config: Optional[Dict[str, Any]] = None, service: Optional[ModelService] = None) -> Flask:
    """
    Create the Flask application

    Args:
        config: Configuration dictionary, loaded with get_default_config() when None
        service: Model service to serve from, built from the config when None

    Returns:
        Flask: Configured application
    """
    if service is None:
        service = ModelService(config if config is not None else get_default_config())

    app = Flask(__name__)

    # Enable CORS for all routes
    CORS(app)

    # Preserve order of JSON keys for readability
    app.json.sort_keys = False
    app.extensions['model_service'] = service

    register_routes(app)
    register_error_handlers(app)
    return app


def register_routes(app: Flask) -> None:

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint to verify the API server is running"""
        return jsonify({"status": "operational"})

    @app.route('/config', methods=['GET'])
    def get_config():
        return jsonify({"featureColumns": get_service().feature_columns})

    @app.route('/features', methods=['GET'])
    def get_features():
        """List the numeric columns of the configured dataset

        Informational only: the model always trains on the feature columns
        fixed in the configuration at startup.
        """
        return jsonify({"features": get_service().available_features()})

    @app.route('/status', methods=['GET'])
    def get_status():
        service = get_service()
        state = service.snapshot()
        return jsonify({
            "modelTrained": state is not None,
            "trainingInProgress": service.training_in_progress,
            "lastTraining": state.summary.to_dict() if state is not None else None
        })

    @app.route('/train', methods=['POST'])
    def train():
        """Train a new model and install it once training succeeds"""
        season_range = validate_season_range(request.get_json(silent=True))
        summary = get_service().train(season_range=season_range)
        return jsonify({
            "message": "Model training complete.",
            "modelId": summary.model_id,
            "accuracy": summary.accuracy,
            "valAccuracy": summary.val_accuracy,
            "samples": summary.samples
        })

    @app.route('/predict', methods=['POST'])
    def predict():
        # Snapshot once so a concurrent training run cannot swap the model mid-request
        state = get_service().snapshot()
        result = predict_outcome(state, request.get_json(silent=True))
        return jsonify(result.to_dict())


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(PredictorError)
    def handle_predictor_error(error):
        if error.status_code >= 500:
            logger.error(f"{request.method} {request.path} failed: {str(error)}")
        else:
            logger.warning(f"{request.method} {request.path} rejected: {str(error)}")
        return jsonify({"error": str(error)}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {str(error)}")
        return jsonify({"error": "Something broke!"}), 500
