#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
NCAA Predictor Configuration Module

This module handles configuration settings for the prediction service:
- Base paths and directories
- Dataset schema (feature columns, label column, season column)
- Fixed training hyperparameters
- Server and logging settings

Configuration is assembled from built-in defaults, an optional JSON file and
environment variable overrides, in that order.
"""

import os
import json
import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

# Base directories
ROOT_DIR = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = ROOT_DIR / "config"
DATA_DIR = ROOT_DIR / "data"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "model_config.json"

# Accepted values for dataset.invalid_row_policy
INVALID_ROW_POLICIES = ("drop", "error", "keep")

DEFAULT_CONFIG = {
    'dataset': {
        'path': str(DATA_DIR / "team_seasons.csv"),
        'feature_columns': ['AdjEM', 'AdjO', 'AdjD', 'AdjT', 'SOS_AdjEM'],
        'label_column': 'Win',
        'season_column': 'Season',
        'invalid_row_policy': 'drop'
    },
    'training': {
        # Fixed for every run, not overridable per request
        'epochs': 50,
        'batch_size': 16,
        'validation_split': 0.2,
        'hidden_layers': [16, 8]
    },
    'server': {
        'host': '0.0.0.0',
        'port': 5000,
        'debug': False
    },
    'logging': {
        'level': 'INFO',
        'dir': None
    }
}


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to a configuration dictionary"""
    dataset_path = os.environ.get('DATASET_PATH')
    if dataset_path:
        config['dataset']['path'] = dataset_path

    port = os.environ.get('PORT')
    if port:
        try:
            config['server']['port'] = int(port)
        except ValueError:
            logger.warning(f"Ignoring non-numeric PORT value: {port}")

    log_level = os.environ.get('LOG_LEVEL')
    if log_level:
        config['logging']['level'] = log_level.upper()

    return config


def get_default_config(config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Get configuration for the prediction service

    Args:
        config_path: Path to a JSON configuration file. Falls back to the
            NCAA_PREDICTOR_CONFIG environment variable, then to
            config/model_config.json when that file exists.
        config: Configuration dictionary (overrides the file when provided)

    Returns:
        Dictionary with 'dataset', 'training', 'server' and 'logging' sections

    Raises:
        ConfigError: If an explicitly requested config file cannot be read
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)

    explicit_path = config_path or os.environ.get('NCAA_PREDICTOR_CONFIG')
    path = Path(explicit_path) if explicit_path else DEFAULT_CONFIG_PATH

    file_config = None
    if path.exists():
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        logger.debug(f"Loaded configuration from {path}")

        # Dataset paths in a config file are relative to the project root
        dataset_section = file_config.get('dataset')
        if isinstance(dataset_section, dict) and dataset_section.get('path'):
            if not Path(dataset_section['path']).is_absolute():
                dataset_section['path'] = str(ROOT_DIR / dataset_section['path'])
    elif explicit_path:
        raise ConfigError(f"Config file not found: {path}")

    for overrides in (file_config, config):
        if not overrides:
            continue
        for section, values in overrides.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values

    return _apply_env_overrides(merged)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the dataset schema of a configuration

    Args:
        config: Configuration dictionary to validate

    Returns:
        The same configuration dictionary

    Raises:
        ConfigError: If the feature schema or row policy is invalid
    """
    dataset = config.get('dataset') or {}
    features: List[str] = dataset.get('feature_columns')
    label = dataset.get('label_column')

    if not isinstance(features, list) or not features:
        raise ConfigError("feature_columns must be a non-empty list")
    if not all(isinstance(name, str) and name for name in features):
        raise ConfigError("feature_columns must contain only non-empty strings")
    if len(set(features)) != len(features):
        raise ConfigError("feature_columns contains duplicate names")
    if not isinstance(label, str) or not label:
        raise ConfigError("label_column must be a non-empty string")
    if label in features:
        raise ConfigError(f"label column '{label}' is also listed as a feature")

    policy = dataset.get('invalid_row_policy', 'drop')
    if policy not in INVALID_ROW_POLICIES:
        raise ConfigError(
            f"Unknown invalid_row_policy '{policy}', expected one of {', '.join(INVALID_ROW_POLICIES)}"
        )

    return config
