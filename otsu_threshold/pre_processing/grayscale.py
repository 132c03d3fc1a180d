"""Grayscale preprocessor producing single-channel 8-bit images."""

from __future__ import annotations

from PIL import Image

from otsu_threshold.core.grayscale import DEFAULT_LUMA, LUMA_WEIGHTS, to_gray
from otsu_threshold.pre_processing.base import ImagePreprocessor, ImageInput, resolve_image


class GrayscalePreprocessor(ImagePreprocessor):
    """Preprocessor that reduces any image to mode 'L' luminance."""

    def __init__(self, luma: str = DEFAULT_LUMA):
        """
        Args:
            luma: Channel weighting, "rec601" (default) or "rec709".
                  Alpha is composited onto black before weighting.
        """
        if luma.lower() not in LUMA_WEIGHTS:
            available = ", ".join(sorted(LUMA_WEIGHTS))
            raise ValueError(f"Unknown luma weighting '{luma}'. Available weightings: {available}")
        self._luma = luma.lower()

    def preprocess(self, image: ImageInput) -> Image.Image:
        return to_gray(resolve_image(image), self._luma)

    def get_name(self) -> str:
        return f"Grayscale(luma={self._luma})"
