"""Decode input images and encode results with Pillow."""

from __future__ import annotations

import logging
import os
from typing import Union

from PIL import Image

from otsu_threshold.errors import ImageDecodeError, ImageOpenError, ImageWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_FORMAT = "PNG"


def load_image(path: PathLike) -> Image.Image:
    """
    Open and fully decode an image file.

    Raises:
        ImageOpenError: If the file does not exist or cannot be read
        ImageDecodeError: If the content is not a recognised image format
    """
    path = os.fspath(path)
    try:
        fp = open(path, "rb")
    except OSError as exc:
        raise ImageOpenError(path) from exc

    with fp:
        try:
            with Image.open(fp) as img:
                img.load()
                image = img.copy()
        except (OSError, EOFError, SyntaxError, ValueError) as exc:
            # UnidentifiedImageError and truncated streams are both OSErrors here
            raise ImageDecodeError(path) from exc

    logger.info("Loaded %s (%sx%s, mode %s)", path, image.width, image.height, image.mode)
    return image


def _format_for(path: str) -> str:
    extension = os.path.splitext(path)[1].lower()
    return Image.registered_extensions().get(extension, DEFAULT_FORMAT)


def save_image(image: Image.Image, path: PathLike) -> None:
    """
    Encode ``image`` to ``path``; the format follows the extension, PNG otherwise.

    Raises:
        ImageWriteError: If the directory cannot be created or encoding fails
    """
    path = os.fspath(path)
    image_format = _format_for(path)
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        image.save(path, format=image_format)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageWriteError(f"could not write {path}: {exc}") from exc

    logger.info("Saved %s image to %s", image_format, path)
