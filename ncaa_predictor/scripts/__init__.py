# -*- coding: utf-8 -*-
"""
Command line scripts for NCAA Predictor.
"""
