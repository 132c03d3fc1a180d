from __future__ import annotations

from typing import Any, Dict, Type

from otsu_threshold.core.binarize import BACKGROUND, FOREGROUND
from otsu_threshold.core.grayscale import DEFAULT_LUMA, LUMA_WEIGHTS
from otsu_threshold.pipelines.base import Pipeline
from otsu_threshold.pipelines.threshold import ThresholdPipeline
from otsu_threshold.pre_processing.factory import PreprocessorFactory
from otsu_threshold.pre_processing.identity import IdentityPreprocessor


DEFAULT_PREPROCESSING = ["grayscale", "otsu"]


class PipelineFactory:
    """Instantiate pipelines based on configuration names."""

    _registry: Dict[str, Type[Pipeline]] = {
        "threshold": ThresholdPipeline,
    }

    @classmethod
    def create(cls, pipeline_name: str, config: Dict[str, Any]) -> Pipeline:
        """Create a pipeline instance for the provided pipeline name."""

        pipeline_class = cls._registry.get(pipeline_name.lower())
        if pipeline_class is None:
            available = ", ".join(sorted(cls._registry.keys())) or "<none>"
            raise ValueError(
                f"Unknown pipeline '{pipeline_name}'. Available pipelines: {available}"
            )

        input_path = config.get("input")
        if not isinstance(input_path, str) or not input_path:
            raise ValueError("Configuration must include an 'input' path")

        output_path = config.get("output")
        if not isinstance(output_path, str) or not output_path:
            raise ValueError("Configuration must include an 'output' path")

        background = config.get("background", BACKGROUND)
        foreground = config.get("foreground", FOREGROUND)
        for name, value in (("background", background), ("foreground", foreground)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Configuration field '{name}' must be an integer between 0 and 255, got {value!r}")

        luma = config.get("luma", DEFAULT_LUMA)
        if not isinstance(luma, str) or luma.lower() not in LUMA_WEIGHTS:
            raise ValueError(f"Configuration field 'luma' must be one of {', '.join(sorted(LUMA_WEIGHTS))}, got {luma!r}")

        preprocessing = config.get("preprocessing", DEFAULT_PREPROCESSING)
        preprocessor = PreprocessorFactory.create(
            preprocessing,
            background=background,
            foreground=foreground,
            luma=luma,
        )
        if preprocessor is None:
            preprocessor = IdentityPreprocessor()

        histogram_plot = config.get("histogram_plot")
        if histogram_plot is not None and not isinstance(histogram_plot, str):
            raise ValueError("Configuration field 'histogram_plot' must be a path if provided")

        return pipeline_class(
            input_path=input_path,
            output_path=output_path,
            preprocessor=preprocessor,
            luma=luma,
            histogram_plot=histogram_plot,
        )
