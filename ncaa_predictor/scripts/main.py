#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
NCAA Predictor - Main Module

Command line entry point of the prediction service. It can start the HTTP
server or run a single training run in process.

Usage:
    python -m ncaa_predictor.scripts.main serve --port 5000
    python -m ncaa_predictor.scripts.main train --from-season 2010 --to-season 2023
"""

import sys
import argparse
import logging
from typing import List, Optional

from ..api.flask_app import create_app
from ..exceptions import PredictorError
from ..models.trainer import ModelService
from ..utils.config import get_default_config
from ..utils.logger import setup_logging

# Configure logger
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="NCAA Win Prediction Service")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON configuration file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", type=str, help="Interface to bind to")
    serve_parser.add_argument("--port", type=int, help="Port to listen on")
    serve_parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")

    train_parser = subparsers.add_parser("train", help="Train a model once and report the result")
    train_parser.add_argument("--from-season", type=int, help="First season to train on")
    train_parser.add_argument("--to-season", type=int, help="Last season to train on")

    return parser.parse_args(argv)


def run_training(service: ModelService, from_season: Optional[int], to_season: Optional[int]) -> int:
    season_range = None
    if from_season is not None or to_season is not None:
        if from_season is None or to_season is None:
            logger.error("Both --from-season and --to-season are required for a season range")
            return 1
        if from_season > to_season:
            logger.error("From season must be less than or equal to to season")
            return 1
        season_range = (from_season, to_season)

    try:
        summary = service.train(season_range=season_range)
    except PredictorError as e:
        logger.error(str(e))
        return 1

    val_accuracy = f"{summary.val_accuracy:.4f}" if summary.val_accuracy is not None else "N/A"
    logger.info(
        f"Trained {summary.model_id} on {summary.samples} rows: "
        f"accuracy={summary.accuracy:.4f}, val_accuracy={val_accuracy}"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the command line interface
    """
    args = parse_arguments(argv)

    try:
        config = get_default_config(config_path=args.config)
        service = ModelService(config)
    except PredictorError as e:
        setup_logging("ncaa_predictor")
        logger.error(f"Invalid configuration: {str(e)}")
        return 1

    log_level = "DEBUG" if args.verbose else config['logging']['level']
    setup_logging("ncaa_predictor", log_level=log_level, log_dir=config['logging'].get('dir'))

    if args.command == "train":
        return run_training(service, args.from_season, args.to_season)

    server_config = config['server']
    host = args.host or server_config['host']
    port = args.port or server_config['port']
    app = create_app(service=service)
    logger.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port, debug=args.debug or server_config['debug'], threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
