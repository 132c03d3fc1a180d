"""Reduce an arbitrary Pillow image to a single-channel 8-bit intensity map."""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
from PIL import Image


# Luma coefficients for the red, green and blue channels.
LUMA_WEIGHTS: Dict[str, Tuple[float, float, float]] = {
    "rec601": (0.299, 0.587, 0.114),
    "rec709": (0.2126, 0.7152, 0.0722),
}

DEFAULT_LUMA = "rec601"

_ALPHA_MODES = {"RGBA", "RGBa", "LA", "La", "PA"}
_WIDE_INT_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


def _composite_on_black(image: Image.Image) -> Image.Image:
    rgba = image.convert("RGBA")
    background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(background, rgba).convert("RGB")


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in _ALPHA_MODES or "transparency" in image.info


def _fresh(gray: Image.Image) -> Image.Image:
    # decoder metadata (tRNS colour, ICC profile) does not describe the reduced image
    gray.info = {}
    return gray


def _reduce_single_channel(image: Image.Image) -> Image.Image:
    raw = np.asarray(image)
    pixels = raw.astype(np.int64)
    if image.mode != "L":
        # 16-bit samples keep their high byte
        pixels >>= 8
    transparency = image.info.get("transparency")
    if isinstance(transparency, int):
        pixels[raw == transparency] = 0
    return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))


def to_gray(image: Image.Image, luma: str = DEFAULT_LUMA) -> Image.Image:
    """
    Convert ``image`` into a mode ``"L"`` image of the same size.

    Transparent pixels, whether from an alpha channel or a ``transparency``
    colour key, read as black. The result carries no metadata of the input.

    Args:
        image: Any decoded Pillow image
        luma: Name of the channel weighting, one of ``LUMA_WEIGHTS``

    Returns:
        PIL.Image: A new single-channel 8-bit image

    Raises:
        ValueError: If ``luma`` is not a known weighting
    """
    weights = LUMA_WEIGHTS.get(luma.lower())
    if weights is None:
        available = ", ".join(sorted(LUMA_WEIGHTS))
        raise ValueError(f"Unknown luma weighting '{luma}'. Available weightings: {available}")

    if image.mode == "L" and "transparency" not in image.info:
        return _fresh(image.copy())

    if image.mode == "L" or image.mode in _WIDE_INT_MODES:
        return _reduce_single_channel(image)

    if image.mode == "1":
        return _fresh(image.convert("L"))

    if image.mode == "F":
        pixels = np.rint(np.asarray(image, dtype=np.float64))
        return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))

    rgb = _composite_on_black(image) if _has_alpha(image) else image.convert("RGB")

    if luma.lower() == DEFAULT_LUMA:
        return _fresh(rgb.convert("L"))
    return _fresh(rgb.convert("L", matrix=weights + (0.0,)))
