# -*- coding: utf-8 -*-
"""
Dataset Module

This module reads the historical team-season CSV file and turns it into
parallel arrays of feature rows and win/loss labels for training.

Cells are parsed permissively: a missing or non-numeric cell becomes NaN
instead of failing the whole load. What happens to such rows afterwards is
decided by apply_row_policy().
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import DatasetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingDataset:
    """Feature rows and labels loaded from one dataset file

    features[i] corresponds to labels[i] (and seasons[i] when a season
    column was requested).
    """
    features: np.ndarray
    labels: np.ndarray
    feature_columns: Tuple[str, ...]
    seasons: Optional[np.ndarray] = None

    def __len__(self):
        return len(self.labels)

    def subset(self, mask: np.ndarray) -> 'TrainingDataset':
        """Return a new dataset holding only the rows selected by a boolean mask"""
        return TrainingDataset(
            features=self.features[mask],
            labels=self.labels[mask],
            feature_columns=self.feature_columns,
            seasons=self.seasons[mask] if self.seasons is not None else None
        )


def _read_csv(path: Union[str, Path], **kwargs) -> pd.DataFrame:
    try:
        return pd.read_csv(path, dtype=str, skipinitialspace=True, **kwargs)
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"Dataset file is empty: {path}") from e
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetError(f"Error loading dataset {path}: {str(e)}") from e


def _numeric_column(df: pd.DataFrame, column: str) -> np.ndarray:
    if column not in df.columns:
        logger.warning(f"Column '{column}' not found in dataset, all values will be NaN")
        return np.full(len(df), np.nan, dtype=float)
    return pd.to_numeric(df[column], errors='coerce').to_numpy(dtype=float)


def load_dataset(path: Union[str, Path], feature_columns: Sequence[str], label_column: str,
                 season_column: Optional[str] = None) -> TrainingDataset:
    """
    Load feature rows and labels from a delimited file

    Args:
        path: Path to the CSV file
        feature_columns: Ordered feature column names
        label_column: Name of the 0/1 label column
        season_column: Optional season column, loaded alongside for range filtering

    Returns:
        TrainingDataset with one feature row and one label per input row

    Raises:
        DatasetError: If the file cannot be opened or read
    """
    df = _read_csv(path)

    if feature_columns:
        features = np.column_stack([_numeric_column(df, col) for col in feature_columns])
    else:
        features = np.empty((len(df), 0))
    labels = _numeric_column(df, label_column)

    seasons = None
    if season_column:
        seasons = _numeric_column(df, season_column) if season_column in df.columns else None

    logger.info(f"Dataset loaded successfully: {len(df)} rows from {path}")
    return TrainingDataset(
        features=features,
        labels=labels,
        feature_columns=tuple(feature_columns),
        seasons=seasons
    )


def apply_row_policy(dataset: TrainingDataset, policy: str = "drop") -> TrainingDataset:
    """
    Apply the invalid-row policy to a freshly loaded dataset

    Args:
        dataset: Dataset as returned by load_dataset()
        policy: 'drop' removes rows with a NaN feature or label, 'error' raises
            on the first such row, 'keep' passes every row through unchanged

    Returns:
        The filtered dataset

    Raises:
        DatasetError: On an invalid row under the 'error' policy, when no rows
            survive the 'drop' policy, or when a label is not 0 or 1
    """
    invalid = np.isnan(dataset.features).any(axis=1) | np.isnan(dataset.labels)

    if policy == "keep":
        if invalid.any():
            logger.warning(f"Keeping {int(invalid.sum())} rows with unparseable values")
    elif policy == "error":
        if invalid.any():
            row = int(np.argmax(invalid))
            columns = list(dataset.feature_columns)
            bad = [columns[i] for i in np.where(np.isnan(dataset.features[row]))[0]]
            if np.isnan(dataset.labels[row]):
                bad.append('label')
            # +2 for the header line and 1-based numbering
            raise DatasetError(f"Invalid value in row {row + 2} for column(s): {', '.join(bad)}")
    elif policy == "drop":
        if invalid.any():
            logger.warning(f"Dropping {int(invalid.sum())} of {len(dataset)} rows with unparseable values")
            dataset = dataset.subset(~invalid)
            if len(dataset) == 0:
                raise DatasetError("No valid rows left in dataset after dropping unparseable rows")
    else:
        raise DatasetError(f"Unknown invalid row policy: {policy}")

    labels = dataset.labels[~np.isnan(dataset.labels)]
    if not np.isin(labels, (0.0, 1.0)).all():
        raise DatasetError("Label column must contain only 0 and 1")

    return dataset


def filter_seasons(dataset: TrainingDataset, from_season: int, to_season: int) -> TrainingDataset:
    """
    Keep only rows whose season lies in the inclusive range [from_season, to_season]

    Raises:
        DatasetError: If the dataset was loaded without a season column
    """
    if dataset.seasons is None:
        raise DatasetError("Dataset has no season column, cannot filter by season")

    with np.errstate(invalid='ignore'):
        mask = (dataset.seasons >= from_season) & (dataset.seasons <= to_season)
    filtered = dataset.subset(mask)
    logger.info(f"Selected {len(filtered)} of {len(dataset)} rows for seasons {from_season}-{to_season}")
    return filtered


def list_available_features(path: Union[str, Path], exclude: Sequence[str] = ()) -> List[str]:
    """
    List the numeric columns of a dataset

    A column counts as numeric when at least one of its cells parses as a number.

    Args:
        path: Path to the CSV file
        exclude: Column names to leave out (label and season columns)

    Returns:
        Column names in file order
    """
    df = _read_csv(path)
    features = []
    for column in df.columns:
        if column in exclude:
            continue
        if pd.to_numeric(df[column], errors='coerce').notna().any():
            features.append(column)
    return features
