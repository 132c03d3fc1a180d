"""Abstract base classes for image preprocessing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from PIL import Image

from otsu_threshold.utils.image_io import load_image


ImageInput = Union[str, Image.Image]


def resolve_image(image: ImageInput) -> Image.Image:
    """Return ``image`` itself, or the decoded file when given a path."""
    if isinstance(image, str):
        return load_image(image)
    return image


class ImagePreprocessor(ABC):
    """Base class for image preprocessing operations."""

    @abstractmethod
    def preprocess(self, image: ImageInput) -> Image.Image:
        """
        Apply preprocessing to the provided image input.

        Args:
            image: Either a path to an image file or a PIL Image object

        Returns:
            PIL.Image: A new image; the input is left untouched
        """

    @abstractmethod
    def get_name(self) -> str:
        """Return a human-readable preprocessor name."""
