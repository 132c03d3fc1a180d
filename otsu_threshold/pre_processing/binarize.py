"""Binarization preprocessor that converts images to two levels with a fixed threshold."""

from __future__ import annotations

from PIL import Image

from otsu_threshold.core.binarize import BACKGROUND, FOREGROUND, binarize
from otsu_threshold.core.grayscale import DEFAULT_LUMA, to_gray
from otsu_threshold.pre_processing.base import ImagePreprocessor, ImageInput, resolve_image


class BinarizePreprocessor(ImagePreprocessor):
    """Preprocessor that splits pixels around a fixed, caller-chosen threshold."""

    def __init__(
        self,
        threshold: int = 128,
        background: int = BACKGROUND,
        foreground: int = FOREGROUND,
        luma: str = DEFAULT_LUMA,
    ):
        """
        Initialize the binarization preprocessor.

        Args:
            threshold: Threshold value for binarization (0-255).
                      Pixels above this value become ``foreground``,
                      the others become ``background``. Default is 128.
            background: Output value for pixels <= threshold (default 0)
            foreground: Output value for pixels > threshold (default 255)
            luma: Channel weighting used when the input is not grayscale yet
        """
        for name, value in (("Threshold", threshold), ("Background", background), ("Foreground", foreground)):
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")
        self._threshold = threshold
        self._background = background
        self._foreground = foreground
        self._luma = luma

    def preprocess(self, image: ImageInput) -> Image.Image:
        """
        Convert the image to two levels.

        Args:
            image: Either a path to an image file or a PIL Image object

        Returns:
            PIL.Image: The binarized image (mode 'L')
        """
        gray = to_gray(resolve_image(image), self._luma)
        return binarize(gray, self._threshold, self._background, self._foreground)

    def get_name(self) -> str:
        return f"Binarize(threshold={self._threshold})"
