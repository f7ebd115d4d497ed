# -*- coding: utf-8 -*-
"""
Data Validation Module

This module validates request payloads before they reach the model: the
per-feature input values of a prediction and the optional season range of a
training run.
"""

import math
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def parse_numeric(value: Any) -> Optional[float]:
    """
    Parse a JSON value as a finite float

    Numbers and numeric strings are accepted. Booleans, None, blank strings,
    NaN and infinities are not.

    Returns:
        The parsed float, or None if the value is not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        # Integers beyond the float range cannot be represented
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_feature_input(payload: Any, feature_columns: Sequence[str]) -> List[float]:
    """
    Extract the feature vector from a prediction request

    Args:
        payload: Decoded JSON body, a mapping of feature name to value
        feature_columns: Feature names in schema order

    Returns:
        List of floats in schema order

    Raises:
        ValidationError: Naming the first missing or non-numeric feature
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object of feature values")

    values = []
    for col in feature_columns:
        number = parse_numeric(payload.get(col))
        if number is None:
            logger.warning(f"Rejected prediction input, invalid value for {col}: {payload.get(col)!r}")
            raise ValidationError(f"Invalid or missing value for {col}", feature=col)
        values.append(number)
    return values


def validate_season_range(payload: Optional[Dict[str, Any]]) -> Optional[Tuple[int, int]]:
    """
    Extract an optional season range from a training request

    Args:
        payload: Decoded JSON body or None

    Returns:
        (from_season, to_season), or None when neither bound is given

    Raises:
        ValidationError: If only one bound is given, a bound is not an
            integer, or from_season is after to_season
    """
    if not payload:
        return None
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    from_season = payload.get('fromSeason')
    to_season = payload.get('toSeason')
    if from_season is None and to_season is None:
        return None
    if from_season is None or to_season is None:
        raise ValidationError("Both fromSeason and toSeason are required for a season range")

    bounds = []
    for name, value in (('fromSeason', from_season), ('toSeason', to_season)):
        number = parse_numeric(value)
        if number is None or not number.is_integer():
            raise ValidationError(f"{name} must be an integer season", feature=name)
        bounds.append(int(number))

    if bounds[0] > bounds[1]:
        raise ValidationError("From season must be less than or equal to to season")
    return bounds[0], bounds[1]
