# -*- coding: utf-8 -*-
"""
Model Training Module

This module owns the live model. ModelService is the single writer of the
trained state: a training run loads the dataset, computes the feature means,
builds and fits a fresh network and then swaps the whole state in at once.
Readers take one snapshot per request and never see a half-built model.

Only one training run may be in flight at a time. A failed run leaves the
previously trained model (if any) in place.
"""

import time
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..data.dataset import apply_row_policy, filter_seasons, list_available_features, load_dataset
from ..exceptions import DatasetError, TrainingError, TrainingInProgressError, ValidationError
from ..features.statistics import calculate_feature_means
from ..utils.config import validate_config
from .network import BinaryClassifierNetwork, build_model

logger = logging.getLogger(__name__)


class ModelState(Enum):
    UNTRAINED = "untrained"
    TRAINING = "training"
    TRAINED = "trained"


@dataclass(frozen=True)
class TrainingSummary:
    """Outcome of one successful training run"""
    model_id: str
    trained_at: str
    samples: int
    features: Tuple[str, ...]
    loss: Optional[float]
    accuracy: Optional[float]
    val_accuracy: Optional[float]
    from_season: Optional[int] = None
    to_season: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'modelId': self.model_id,
            'trainedAt': self.trained_at,
            'samples': self.samples,
            'features': list(self.features),
            'fromSeason': self.from_season,
            'toSeason': self.to_season,
            'loss': self.loss,
            'accuracy': self.accuracy,
            'valAccuracy': self.val_accuracy
        }


@dataclass(frozen=True)
class TrainedState:
    """Model, feature means and summary installed together by one training run"""
    model: BinaryClassifierNetwork
    feature_columns: Tuple[str, ...]
    feature_means: Tuple[float, ...]
    summary: TrainingSummary


def _log_epoch(epoch: int, metrics: Dict[str, Optional[float]]) -> None:
    def fmt(value):
        return f"{value:.4f}" if value is not None else "N/A"

    logger.info(
        f"Epoch {epoch}: loss={fmt(metrics['loss'])}, accuracy={fmt(metrics['accuracy'])}, "
        f"val_loss={fmt(metrics['val_loss'])}, val_accuracy={fmt(metrics['val_accuracy'])}"
    )


class ModelService:
    """
    Holder of the process-wide trained model

    Args:
        config: Configuration dictionary as returned by get_default_config()
        model_factory: Callable building an untrained network from
            (input_size, hidden_layers)
    """

    def __init__(self, config: Dict[str, Any],
                 model_factory: Callable[..., BinaryClassifierNetwork] = build_model):
        self.config = validate_config(config)
        self.model_factory = model_factory
        self._state: Optional[TrainedState] = None
        self._state_lock = threading.Lock()
        self._training_lock = threading.Lock()

    @property
    def feature_columns(self) -> List[str]:
        return list(self.config['dataset']['feature_columns'])

    @property
    def state(self) -> ModelState:
        if self._training_lock.locked():
            return ModelState.TRAINING
        if self.snapshot() is not None:
            return ModelState.TRAINED
        return ModelState.UNTRAINED

    @property
    def is_trained(self) -> bool:
        return self.snapshot() is not None

    @property
    def training_in_progress(self) -> bool:
        return self._training_lock.locked()

    def snapshot(self) -> Optional[TrainedState]:
        """Return the currently installed state, or None before the first successful run"""
        with self._state_lock:
            return self._state

    def available_features(self) -> List[str]:
        """List the numeric dataset columns that could serve as features"""
        dataset_config = self.config['dataset']
        exclude = [dataset_config['label_column']]
        if dataset_config.get('season_column'):
            exclude.append(dataset_config['season_column'])
        return list_available_features(dataset_config['path'], exclude=exclude)

    def train(self, season_range: Optional[Tuple[int, int]] = None) -> TrainingSummary:
        """
        Run one training run and install its result

        Args:
            season_range: Optional inclusive (from_season, to_season) filter

        Returns:
            TrainingSummary of the new model

        Raises:
            TrainingInProgressError: If another run is already in flight
            ValidationError: If a season range is given but the dataset has no season column
            TrainingError: If loading or fitting fails. The previous model stays installed.
        """
        if not self._training_lock.acquire(blocking=False):
            raise TrainingInProgressError("Training already in progress")

        try:
            new_state = self._run_training(season_range)
            with self._state_lock:
                self._state = new_state
        finally:
            self._training_lock.release()

        logger.info(f"Model training complete: {new_state.summary.model_id}")
        return new_state.summary

    def _run_training(self, season_range: Optional[Tuple[int, int]]) -> TrainedState:
        dataset_config = self.config['dataset']
        training_config = self.config['training']
        feature_columns = self.feature_columns

        try:
            dataset = load_dataset(
                dataset_config['path'],
                feature_columns,
                dataset_config['label_column'],
                season_column=dataset_config.get('season_column')
            )
            if season_range is not None:
                if dataset.seasons is None:
                    raise ValidationError("Dataset has no season column, cannot train on a season range")
                dataset = filter_seasons(dataset, *season_range)
            dataset = apply_row_policy(dataset, dataset_config.get('invalid_row_policy', 'drop'))
        except DatasetError as e:
            logger.error(f"Training error: {str(e)}")
            raise TrainingError(f"Training failed: {str(e)}") from e

        if len(dataset) == 0:
            raise TrainingError("Training failed: no rows available for training")

        feature_means = calculate_feature_means(dataset.features)

        logger.info(f"Starting model training on {len(dataset)} rows with features: {', '.join(feature_columns)}")
        try:
            model = self.model_factory(dataset.features.shape[1], training_config['hidden_layers'])
            history = model.fit(
                dataset.features,
                dataset.labels,
                epochs=training_config['epochs'],
                batch_size=training_config['batch_size'],
                validation_split=training_config['validation_split'],
                on_epoch_end=_log_epoch
            )
        except Exception as e:
            logger.error(f"Training error: {str(e)}")
            raise TrainingError(f"Training failed: {str(e)}") from e

        final = history[-1] if history else {}
        summary = TrainingSummary(
            model_id=f"model_{int(time.time() * 1000)}",
            trained_at=datetime.now(timezone.utc).isoformat(),
            samples=len(dataset),
            features=tuple(feature_columns),
            loss=final.get('loss'),
            accuracy=final.get('accuracy'),
            val_accuracy=final.get('val_accuracy'),
            from_season=season_range[0] if season_range else None,
            to_season=season_range[1] if season_range else None
        )
        return TrainedState(
            model=model,
            feature_means=tuple(feature_means),
            summary=summary,
            feature_columns=tuple(feature_columns)
        )
