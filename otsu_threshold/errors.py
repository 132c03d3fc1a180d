"""Exceptions raised at the I/O and configuration boundary."""

from __future__ import annotations


class ThresholdError(Exception):
    """Base class for every error the tool reports to the user."""


class ImageOpenError(ThresholdError):
    """The input file could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"could not open file: {path}")
        self.path = path


class ImageDecodeError(ThresholdError):
    """The input file is not a recognised image format."""

    def __init__(self, path: str) -> None:
        super().__init__(f"could not decode: {path}")
        self.path = path


class ImageWriteError(ThresholdError):
    """The output image could not be encoded or written."""


class ConfigError(ThresholdError):
    """The configuration file is missing or malformed."""
