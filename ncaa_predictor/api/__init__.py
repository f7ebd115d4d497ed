# -*- coding: utf-8 -*-
"""
API Package for NCAA Predictor

HTTP interface of the prediction service.
"""

from .flask_app import create_app

__all__ = [
    'create_app'
]
