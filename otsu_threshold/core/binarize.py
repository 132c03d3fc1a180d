"""Two-level mapping of a grayscale image around a threshold."""

from __future__ import annotations

from PIL import Image


BACKGROUND = 0
FOREGROUND = 255


def _check_level(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


def binarize(
    gray: Image.Image,
    threshold: int,
    background: int = BACKGROUND,
    foreground: int = FOREGROUND,
) -> Image.Image:
    """
    Map every pixel of ``gray`` to ``foreground`` when it is strictly brighter
    than ``threshold`` and to ``background`` otherwise.

    Args:
        gray: A mode "L" image
        threshold: Separating intensity (0-255)
        background: Output value for pixels <= threshold
        foreground: Output value for pixels > threshold

    Returns:
        PIL.Image: A new mode "L" image of the same size, without the
        metadata of ``gray``
    """
    _check_level("Threshold", threshold)
    _check_level("Background", background)
    _check_level("Foreground", foreground)
    if gray.mode != "L":
        raise ValueError(f"Binarization requires a grayscale (mode 'L') image, got mode '{gray.mode}'")

    lut = [foreground if level > threshold else background for level in range(256)]
    result = gray.point(lut)
    # only the two output levels are meaningful, not the source metadata
    result.info = {}
    return result
