# -*- coding: utf-8 -*-
"""
NCAA Predictor

Trains a small neural network on historical team-season statistics and serves
win predictions with a plain-language explanation over HTTP.
"""

__version__ = "1.0.0"
