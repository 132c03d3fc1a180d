import logging
from typing import Any, Dict, Optional

from otsu_threshold.core.grayscale import DEFAULT_LUMA, to_gray
from otsu_threshold.core.histogram import build_histogram
from otsu_threshold.pipelines.base import Pipeline
from otsu_threshold.pre_processing.base import ImagePreprocessor
from otsu_threshold.pre_processing.otsu import THRESHOLD_INFO_KEY
from otsu_threshold.utils.image_io import load_image, save_image
from otsu_threshold.utils.visualization import create_histogram_plot


logger = logging.getLogger(__name__)


class ThresholdPipeline(Pipeline):
    """Load one image, run it through the preprocessing chain and write the result."""

    def __init__(
        self,
        input_path: str,
        output_path: str,
        preprocessor: ImagePreprocessor,
        luma: str = DEFAULT_LUMA,
        histogram_plot: Optional[str] = None,
    ) -> None:
        self._input_path = input_path
        self._output_path = output_path
        self._preprocessor = preprocessor
        self._luma = luma
        self._histogram_plot = histogram_plot

    @property
    def preprocessor(self) -> ImagePreprocessor:
        return self._preprocessor

    def get_name(self) -> str:
        return "threshold"

    def run(self) -> Dict[str, Any]:
        logger.info("Starting threshold pipeline with preprocessor %s", self._preprocessor.get_name())

        image = load_image(self._input_path)
        result = self._preprocessor.preprocess(image)
        threshold = result.info.get(THRESHOLD_INFO_KEY)

        source_histogram = build_histogram(to_gray(image, self._luma))
        total = image.width * image.height

        save_image(result, self._output_path)

        if self._histogram_plot:
            create_histogram_plot(source_histogram, threshold, self._histogram_plot)

        metrics: Dict[str, Any] = {
            "width": image.width,
            "height": image.height,
            "input_mode": image.mode,
            "output_path": self._output_path,
            "preprocessor": self._preprocessor.get_name(),
        }
        if threshold is not None:
            # share of source pixels strictly above the threshold
            above = sum(source_histogram[threshold + 1:])
            metrics["threshold"] = threshold
            metrics["foreground_ratio"] = above / total if total else 0.0
            logger.info(
                "Pipeline completed - threshold: %s, foreground ratio: %.4f, output: %s",
                threshold,
                metrics["foreground_ratio"],
                self._output_path,
            )
        else:
            logger.info("Pipeline completed - no threshold selected, output: %s", self._output_path)

        return metrics
