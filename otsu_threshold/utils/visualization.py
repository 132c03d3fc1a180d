"""Utility functions for creating visualizations."""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt

from otsu_threshold.errors import ImageWriteError

logger = logging.getLogger(__name__)


def create_histogram_plot(histogram: Sequence[int], threshold: Optional[int], path: str) -> str:
    """
    Save a bar chart of the intensity histogram with the threshold marked.

    Args:
        histogram: 256 pixel counts
        threshold: Selected threshold, or None when no threshold was computed
        path: Destination file (PNG)

    Returns:
        The path the chart was written to

    Raises:
        ImageWriteError: If the chart cannot be written
    """
    fig, ax = plt.subplots(figsize=(10, 4))
    try:
        ax.bar(range(len(histogram)), histogram, width=1.0, color="gray")
        if threshold is not None:
            ax.axvline(threshold, color="red", linestyle="--", label=f"threshold = {threshold}")
            ax.legend(loc="upper right")
        ax.set_xlim(-0.5, len(histogram) - 0.5)
        ax.set_xlabel("Intensity")
        ax.set_ylabel("Pixels")
        ax.set_title("Intensity histogram")
        fig.tight_layout()

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(path, dpi=100)
    except (OSError, ValueError) as exc:
        raise ImageWriteError(f"could not write histogram plot {path}: {exc}") from exc
    finally:
        plt.close(fig)

    logger.info("Saved histogram plot to %s", path)
    return path
