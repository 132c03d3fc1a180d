"""Pure image transforms: grayscale, histogram, Otsu selection, binarization."""

from otsu_threshold.core.grayscale import to_gray, LUMA_WEIGHTS
from otsu_threshold.core.histogram import build_histogram, NUM_LEVELS
from otsu_threshold.core.otsu import otsu_threshold, between_class_variance
from otsu_threshold.core.binarize import binarize, BACKGROUND, FOREGROUND

__all__ = [
    "to_gray",
    "LUMA_WEIGHTS",
    "build_histogram",
    "NUM_LEVELS",
    "otsu_threshold",
    "between_class_variance",
    "binarize",
    "BACKGROUND",
    "FOREGROUND",
]
