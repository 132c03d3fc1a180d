import random

import pytest
from PIL import Image

from otsu_threshold.core.histogram import NUM_LEVELS, build_histogram
from otsu_threshold.core.otsu import between_class_variance, otsu_threshold


def _histogram(**counts):
    histogram = [0] * NUM_LEVELS
    for key, count in counts.items():
        histogram[int(key.lstrip("v"))] = count
    return histogram


def test_two_uniform_classes_pick_lowest_threshold():
    histogram = _histogram(v20=8, v220=8)

    assert otsu_threshold(histogram) == 20


def test_plateau_of_equal_scores():
    histogram = _histogram(v20=8, v220=8)

    scores = {between_class_variance(histogram, t) for t in range(20, 220)}
    assert len(scores) == 1
    assert scores.pop() == 8 * 8 * 200.0 ** 2


def test_bimodal_threshold_falls_between_modes():
    histogram = [0] * NUM_LEVELS
    for level in range(40, 61):
        histogram[level] = 10
    for level in range(190, 211):
        histogram[level] = 10

    threshold = otsu_threshold(histogram)

    assert 60 <= threshold < 190


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_exhaustive_search(seed):
    rng = random.Random(seed)
    histogram = [rng.randint(0, 50) if rng.random() < 0.3 else 0 for _ in range(NUM_LEVELS)]

    scores = [between_class_variance(histogram, t) for t in range(NUM_LEVELS)]
    best = max(scores)
    expected = scores.index(best) if best > 0 else 0

    assert otsu_threshold(histogram) == expected


def test_repeated_calls_are_identical():
    histogram = [(level * 7919) % 13 for level in range(NUM_LEVELS)]

    results = {otsu_threshold(histogram) for _ in range(5)}

    assert len(results) == 1


@pytest.mark.parametrize("value", [0, 1, 128, 255])
def test_single_intensity_defaults_to_zero(value):
    gray = Image.new("L", (6, 3), value)

    assert otsu_threshold(build_histogram(gray)) == 0


def test_single_pixel_and_empty_histograms_default_to_zero():
    assert otsu_threshold(_histogram(v77=1)) == 0
    assert otsu_threshold([0] * NUM_LEVELS) == 0


def test_degenerate_split_scores_zero():
    histogram = _histogram(v20=8, v220=8)

    assert between_class_variance(histogram, 10) == 0.0
    assert between_class_variance(histogram, 230) == 0.0


def test_rejects_wrong_histogram_length():
    with pytest.raises(ValueError, match="256 bins"):
        otsu_threshold([1, 2, 3])


def test_rejects_out_of_range_candidate():
    with pytest.raises(ValueError):
        between_class_variance([0] * NUM_LEVELS, 256)
