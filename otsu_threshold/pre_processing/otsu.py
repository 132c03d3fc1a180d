"""Otsu preprocessor that binarizes images with an automatically selected threshold."""

from __future__ import annotations

import logging

from PIL import Image

from otsu_threshold.core.binarize import BACKGROUND, FOREGROUND, binarize
from otsu_threshold.core.grayscale import DEFAULT_LUMA, to_gray
from otsu_threshold.core.histogram import build_histogram
from otsu_threshold.core.otsu import otsu_threshold
from otsu_threshold.pre_processing.base import ImagePreprocessor, ImageInput, resolve_image

logger = logging.getLogger(__name__)

# Key under which the selected threshold is recorded in the result's ``info``.
THRESHOLD_INFO_KEY = "otsu_threshold"


class OtsuPreprocessor(ImagePreprocessor):
    """Preprocessor that picks the threshold maximising between-class variance."""

    def __init__(
        self,
        background: int = BACKGROUND,
        foreground: int = FOREGROUND,
        luma: str = DEFAULT_LUMA,
    ):
        for name, value in (("Background", background), ("Foreground", foreground)):
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")
        self._background = background
        self._foreground = foreground
        self._luma = luma

    def select_threshold(self, image: ImageInput) -> int:
        """Return the Otsu threshold of the image's intensity histogram."""
        gray = to_gray(resolve_image(image), self._luma)
        return otsu_threshold(build_histogram(gray))

    def preprocess(self, image: ImageInput) -> Image.Image:
        """
        Binarize the image around its Otsu threshold.

        The threshold is stored in ``result.info["otsu_threshold"]``.
        """
        gray = to_gray(resolve_image(image), self._luma)
        threshold = otsu_threshold(build_histogram(gray))
        logger.info("Otsu threshold: %s", threshold)

        result = binarize(gray, threshold, self._background, self._foreground)
        result.info[THRESHOLD_INFO_KEY] = threshold
        return result

    def get_name(self) -> str:
        return f"Otsu(background={self._background}, foreground={self._foreground})"
