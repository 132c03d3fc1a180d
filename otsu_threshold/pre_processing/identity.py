"""Identity preprocessor that returns the image unchanged."""

from __future__ import annotations

from PIL import Image

from otsu_threshold.pre_processing.base import ImagePreprocessor, ImageInput, resolve_image


class IdentityPreprocessor(ImagePreprocessor):
    """Preprocessor that returns a copy of the image (pass-through)."""

    def preprocess(self, image: ImageInput) -> Image.Image:
        return resolve_image(image).copy()

    def get_name(self) -> str:
        return "Identity"
