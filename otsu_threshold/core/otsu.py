"""Otsu's global threshold selection over a 256-bin intensity histogram."""

from __future__ import annotations

import logging
from typing import Sequence

from otsu_threshold.core.histogram import NUM_LEVELS

logger = logging.getLogger(__name__)


def _check_histogram(histogram: Sequence[int]) -> None:
    if len(histogram) != NUM_LEVELS:
        raise ValueError(f"Histogram must have {NUM_LEVELS} bins, got {len(histogram)}")


def between_class_variance(histogram: Sequence[int], threshold: int) -> float:
    """
    Score a single split of ``histogram`` at ``threshold``.

    Class a holds the intensities ``<= threshold``, class b the rest. The score
    is ``na * nb * (mean_a - mean_b) ** 2``; splits leaving either class empty
    score 0.0.
    """
    _check_histogram(histogram)
    if not 0 <= threshold < NUM_LEVELS:
        raise ValueError(f"Threshold must be between 0 and 255, got {threshold}")

    na = sum(histogram[: threshold + 1])
    nb = sum(histogram[threshold + 1 :])
    if na == 0 or nb == 0:
        return 0.0

    sa = sum(level * histogram[level] for level in range(threshold + 1))
    sb = sum(level * histogram[level] for level in range(threshold + 1, NUM_LEVELS))
    mean_a = sa / na
    mean_b = sb / nb
    return float(na) * float(nb) * (mean_a - mean_b) ** 2


def otsu_threshold(histogram: Sequence[int]) -> int:
    """
    Return the intensity that maximises the between-class variance.

    A single pass over the candidates keeps running count and intensity sums
    for the low class. Ties keep the lowest candidate. When no candidate splits
    the pixels into two non-empty classes the result is 0.

    Args:
        histogram: 256 pixel counts, index i holding the count of intensity i

    Returns:
        int: The selected threshold in [0, 255]
    """
    _check_histogram(histogram)

    total = sum(histogram)
    total_sum = sum(level * count for level, count in enumerate(histogram))

    na, sa = 0, 0
    best_score, best_threshold = 0.0, 0
    found_split = False

    for t in range(NUM_LEVELS):
        na += histogram[t]
        sa += t * histogram[t]
        nb = total - na
        if na == 0:
            continue
        if nb == 0:
            break

        found_split = True
        mean_a = sa / na
        mean_b = (total_sum - sa) / nb
        score = float(na) * float(nb) * (mean_a - mean_b) ** 2
        if score > best_score:
            best_score = score
            best_threshold = t

    if not found_split:
        logger.warning("No threshold splits the histogram into two classes; defaulting to 0")

    return best_threshold
