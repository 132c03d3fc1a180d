"""Intensity histogram of a grayscale image."""

from __future__ import annotations

from typing import List

import numpy as np
from PIL import Image


NUM_LEVELS = 256


def build_histogram(gray: Image.Image) -> List[int]:
    """Count how many pixels carry each of the 256 intensities of a mode "L" image."""
    if gray.mode != "L":
        raise ValueError(f"Histogram requires a grayscale (mode 'L') image, got mode '{gray.mode}'")

    pixels = np.asarray(gray, dtype=np.uint8).ravel()
    counts = np.bincount(pixels, minlength=NUM_LEVELS)
    return [int(count) for count in counts]
