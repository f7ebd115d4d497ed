# -*- coding: utf-8 -*-
"""
Utilities Package for NCAA Predictor

Configuration and logging helpers shared by the service and the command line.
"""
