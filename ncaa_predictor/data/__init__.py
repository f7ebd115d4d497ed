#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Data Package for NCAA Predictor

This package contains modules for loading the historical dataset and
validating request payloads.
"""
