# -*- coding: utf-8 -*-
"""
Neural Network Module

Builds and fits the feed-forward binary classifier used for win predictions:
dense(16, relu) -> dense(8, relu) -> dense(1, sigmoid), trained with the Adam
optimizer on binary cross-entropy and tracked by accuracy.

The numeric work is done by scikit-learn's MLPClassifier. This module only
exposes a narrow build / fit / predict interface around it.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np
from sklearn.metrics import accuracy_score, log_loss
from sklearn.neural_network import MLPClassifier

logger = logging.getLogger(__name__)

HIDDEN_LAYERS = (16, 8)
CLASSES = np.array([0.0, 1.0])
DECISION_THRESHOLD = 0.5


class BinaryClassifierNetwork:
    """
    Handle around one classifier instance

    A handle is fitted exactly once and is never refitted afterwards, so a
    reference held by a reader always points at a stable model.
    """

    def __init__(self, input_size: int, estimator: MLPClassifier):
        self.input_size = input_size
        self.estimator = estimator
        self.history: List[Dict[str, Optional[float]]] = []
        self.fitted = False

    def fit(self, X: np.ndarray, y: np.ndarray, epochs: int, batch_size: int,
            validation_split: float = 0.0,
            on_epoch_end: Optional[Callable[[int, Dict[str, Optional[float]]], None]] = None
            ) -> List[Dict[str, Optional[float]]]:
        """
        Train the network

        The last `validation_split` fraction of the rows is held out and
        evaluated after every epoch, the rest is trained on in mini-batches.

        Args:
            X: Feature matrix, shape (samples, input_size)
            y: 0/1 labels
            epochs: Number of passes over the training rows
            batch_size: Mini-batch size
            validation_split: Fraction of rows held out for validation
            on_epoch_end: Callback receiving (epoch number, metrics dict)

        Returns:
            List of per-epoch metrics with keys loss, accuracy, val_loss, val_accuracy

        Raises:
            ValueError: On shape mismatch, an empty training split, a second
                call on an already fitted handle, or values the estimator rejects
        """
        if self.fitted:
            raise ValueError("Network has already been fitted, build a new one")

        X = np.asarray(X, dtype=float)
        y = np.asarray(y, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.input_size:
            raise ValueError(f"Expected feature matrix with {self.input_size} columns, got shape {X.shape}")
        if len(X) != len(y):
            raise ValueError(f"Got {len(X)} feature rows but {len(y)} labels")

        split_at = int(np.floor(len(X) * (1 - validation_split)))
        X_train, y_train = X[:split_at], y[:split_at]
        X_val, y_val = X[split_at:], y[split_at:]
        if len(X_train) == 0:
            raise ValueError("No training rows left after the validation split")

        self.estimator.set_params(batch_size=min(batch_size, len(X_train)))

        for epoch in range(1, epochs + 1):
            self.estimator.partial_fit(X_train, y_train, classes=CLASSES)

            metrics = {
                'loss': float(self.estimator.loss_),
                'accuracy': float(accuracy_score(y_train, self._predict_class(X_train))),
                'val_loss': None,
                'val_accuracy': None
            }
            if len(X_val) > 0:
                val_proba = self._positive_proba(X_val)
                metrics['val_loss'] = float(log_loss(y_val, val_proba, labels=CLASSES))
                metrics['val_accuracy'] = float(accuracy_score(y_val, (val_proba >= DECISION_THRESHOLD).astype(float)))

            self.history.append(metrics)
            if on_epoch_end is not None:
                on_epoch_end(epoch, metrics)

        self.fitted = True
        return self.history

    def _positive_proba(self, X: np.ndarray) -> np.ndarray:
        positive = list(self.estimator.classes_).index(1.0)
        return self.estimator.predict_proba(X)[:, positive]

    def _predict_class(self, X: np.ndarray) -> np.ndarray:
        return (self._positive_proba(X) >= DECISION_THRESHOLD).astype(float)

    def predict_probability(self, vector: Sequence[float]) -> float:
        """
        Run one forward pass for a single feature vector

        Returns:
            Probability of the positive class in [0, 1]
        """
        if not self.fitted:
            raise ValueError("Network has not been fitted")
        row = np.asarray(vector, dtype=float).reshape(1, -1)
        if row.shape[1] != self.input_size:
            raise ValueError(f"Expected {self.input_size} features, got {row.shape[1]}")
        return float(self._positive_proba(row)[0])

    def summary(self) -> Dict[str, Any]:
        """Return the topology and the final epoch metrics"""
        return {
            'input_size': self.input_size,
            'hidden_layers': list(self.estimator.hidden_layer_sizes),
            'epochs_trained': len(self.history),
            'final_metrics': self.history[-1] if self.history else None
        }


def build_model(input_size: int, hidden_layers: Sequence[int] = HIDDEN_LAYERS) -> BinaryClassifierNetwork:
    """
    Build a new, untrained classifier

    Args:
        input_size: Number of input features
        hidden_layers: Units per hidden relu layer

    Returns:
        BinaryClassifierNetwork ready to be fitted
    """
    if input_size < 1:
        raise ValueError(f"input_size must be positive, got {input_size}")

    # Binary targets give a single logistic output unit trained on log-loss
    estimator = MLPClassifier(
        hidden_layer_sizes=tuple(hidden_layers),
        activation='relu',
        solver='adam',
        shuffle=True
    )
    logger.debug(f"Built network {input_size} -> {' -> '.join(str(h) for h in hidden_layers)} -> 1")
    return BinaryClassifierNetwork(input_size, estimator)
