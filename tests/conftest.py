import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def halves_image():
    """4x4 RGB image: left two columns intensity 20, right two columns 220."""
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    pixels[:, :2] = 20
    pixels[:, 2:] = 220
    return Image.fromarray(pixels)


@pytest.fixture
def random_gray():
    rng = np.random.default_rng(1234)
    return Image.fromarray(rng.integers(0, 256, size=(7, 5), dtype=np.uint8))


@pytest.fixture
def halves_png(tmp_path, halves_image):
    path = tmp_path / "halves.png"
    halves_image.save(path)
    return str(path)


@pytest.fixture(autouse=True)
def no_tracking_server(monkeypatch):
    monkeypatch.delenv("MLFLOW_TRACKING_URI", raising=False)
