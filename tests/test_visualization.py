import pytest

from otsu_threshold.core.histogram import NUM_LEVELS
from otsu_threshold.errors import ImageWriteError
from otsu_threshold.utils.visualization import create_histogram_plot


def test_writes_plot(tmp_path):
    histogram = [level % 7 for level in range(NUM_LEVELS)]
    path = str(tmp_path / "hist.png")

    assert create_histogram_plot(histogram, 100, path) == path
    assert (tmp_path / "hist.png").stat().st_size > 0


def test_plot_without_threshold(tmp_path):
    path = tmp_path / "hist.png"

    create_histogram_plot([0] * NUM_LEVELS, None, str(path))

    assert path.exists()


def test_unwritable_plot(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(ImageWriteError):
        create_histogram_plot([0] * NUM_LEVELS, 0, str(blocker / "hist.png"))
