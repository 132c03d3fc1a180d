"""Binarize an image with Otsu's threshold from the command line."""

from __future__ import annotations

import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from typing import Any, Dict, List, Optional

import mlflow
import yaml
from mlflow.exceptions import MlflowException
from dotenv import load_dotenv

from otsu_threshold.core.grayscale import LUMA_WEIGHTS
from otsu_threshold.errors import ConfigError, ThresholdError
from otsu_threshold.pipelines.factory import DEFAULT_PREPROCESSING, PipelineFactory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "pipeline": "threshold",
    "output": "output.png",
    "background": 0,
    "foreground": 255,
    "luma": "rec601",
    "preprocessing": DEFAULT_PREPROCESSING,
}

# Numeric pipeline results recorded as MLflow metrics.
TRACKED_METRICS = ("threshold", "width", "height", "foreground_ratio")


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"could not read config file: {config_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file {config_path}: {exc}") from exc

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"config file {config_path} must contain a mapping")

    logger.info(f"Loaded configuration from {config_path}")
    return config


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="otsu-threshold",
        description="Convert an image to black and white using Otsu's threshold.",
    )
    parser.add_argument("path", help="File to be thresholded.")
    parser.add_argument("-o", "--output", help="Place the output into <file> (default: output.png).")
    parser.add_argument("-c", "--config", help="YAML configuration file.")
    parser.add_argument("--background", type=int, help="Value for pixels at or below the threshold (default: 0).")
    parser.add_argument("--foreground", type=int, help="Value for pixels above the threshold (default: 255).")
    parser.add_argument("--luma", choices=sorted(LUMA_WEIGHTS), help="Grayscale weighting (default: rec601).")
    parser.add_argument("--histogram-plot", help="Also save a plot of the intensity histogram to this file.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser


def resolve_config(args: Namespace) -> Dict[str, Any]:
    """Merge built-in defaults, the YAML file and explicit command-line flags."""
    config = dict(DEFAULT_CONFIG)
    if args.config:
        config.update(load_config(args.config))

    overrides = {
        "output": args.output,
        "background": args.background,
        "foreground": args.foreground,
        "luma": args.luma,
        "histogram_plot": args.histogram_plot,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    config["input"] = args.path
    return config


def setup_mlflow_experiment(tracking_uri: str, experiment_name: str) -> str:
    """Get or create MLflow experiment and return its ID."""
    mlflow.set_tracking_uri(tracking_uri)
    logger.info("Connected to MLflow tracking server")

    experiment = mlflow.get_experiment_by_name(experiment_name)
    if experiment is None:
        experiment_id = mlflow.create_experiment(experiment_name)
        logger.info(f"Created new experiment: {experiment_name}")
    else:
        experiment_id = experiment.experiment_id
        logger.info(f"Using existing experiment: {experiment_name}")

    return experiment_id


def log_run_to_mlflow(config: Dict[str, Any], metrics: Dict[str, Any]) -> None:
    """Log parameters and numeric results to MLflow."""
    mlflow.log_params({
        "input": config["input"],
        "output": config["output"],
        "luma": config["luma"],
        "background": config["background"],
        "foreground": config["foreground"],
        "preprocessor": metrics["preprocessor"],
    })
    for metric_name in TRACKED_METRICS:
        if metric_name in metrics:
            mlflow.log_metric(metric_name, metrics[metric_name])

    logger.info("Logged run to MLflow")


def run_threshold(config: Dict[str, Any]) -> Dict[str, Any]:
    """Create and run the pipeline, tracking it in MLflow when configured."""
    pipeline_name = config.get("pipeline", "threshold")
    pipeline = PipelineFactory.create(pipeline_name, config)

    tracking = config.get("mlflow") or {}
    if not isinstance(tracking, dict):
        raise ConfigError("Configuration field 'mlflow' must be a mapping if provided")

    tracking_uri = tracking.get("tracking_uri") or os.getenv("MLFLOW_TRACKING_URI")
    if not tracking_uri:
        logger.info("Running pipeline: %s", pipeline.get_name())
        return pipeline.run()

    experiment_id = setup_mlflow_experiment(
        tracking_uri, tracking.get("experiment_name", "Otsu Threshold")
    )
    with mlflow.start_run(experiment_id=experiment_id, run_name=tracking.get("run_name")):
        logger.info("Running pipeline: %s", pipeline.get_name())
        metrics = pipeline.run()
        log_run_to_mlflow(config, metrics)
    return metrics


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the script."""
    args = build_parser().parse_args(argv)
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        metrics = run_threshold(config)
    except (ThresholdError, ValueError, MlflowException) as e:
        logger.error(f"Thresholding failed: {e}")
        sys.exit(1)

    logger.info("Wrote %s (threshold %s)", metrics["output_path"], metrics.get("threshold"))


if __name__ == "__main__":
    main()
