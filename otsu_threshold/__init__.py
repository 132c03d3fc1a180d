"""Global Otsu thresholding of raster images."""

__version__ = "0.1.0"
