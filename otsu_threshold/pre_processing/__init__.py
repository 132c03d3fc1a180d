"""Image preprocessing package."""

from otsu_threshold.pre_processing.base import ImagePreprocessor, ImageInput
from otsu_threshold.pre_processing.identity import IdentityPreprocessor
from otsu_threshold.pre_processing.grayscale import GrayscalePreprocessor
from otsu_threshold.pre_processing.binarize import BinarizePreprocessor
from otsu_threshold.pre_processing.otsu import OtsuPreprocessor, THRESHOLD_INFO_KEY
from otsu_threshold.pre_processing.sequential import SequentialPreprocessor
from otsu_threshold.pre_processing.factory import PreprocessorFactory

__all__ = [
    "ImagePreprocessor",
    "ImageInput",
    "IdentityPreprocessor",
    "GrayscalePreprocessor",
    "BinarizePreprocessor",
    "OtsuPreprocessor",
    "THRESHOLD_INFO_KEY",
    "SequentialPreprocessor",
    "PreprocessorFactory",
]
