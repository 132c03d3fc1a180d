import numpy as np
import pytest
from PIL import Image

from otsu_threshold.core.grayscale import to_gray


def test_grayscale_input_passes_through(random_gray):
    gray = to_gray(random_gray)

    assert gray.mode == "L"
    assert gray is not random_gray
    assert gray.tobytes() == random_gray.tobytes()


def test_keeps_size(halves_image):
    assert to_gray(halves_image).size == halves_image.size


@pytest.mark.parametrize("value", [0, 20, 128, 220, 255])
def test_neutral_gray_keeps_its_intensity(value):
    image = Image.new("RGB", (3, 2), (value, value, value))

    assert set(to_gray(image).getdata()) == {value}
    # rec709 goes through a float matrix, allow one level of rounding
    assert all(abs(level - value) <= 1 for level in to_gray(image, "rec709").getdata())


def test_green_weighs_more_than_red_and_blue():
    pixels = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8)

    red, green, blue = to_gray(Image.fromarray(pixels)).getdata()

    assert green > red > blue


def test_rec709_weighs_green_more_than_rec601():
    image = Image.new("RGB", (1, 1), (0, 255, 0))

    assert to_gray(image, "rec709").getpixel((0, 0)) > to_gray(image, "rec601").getpixel((0, 0))


def test_transparent_pixels_read_as_black():
    image = Image.new("RGBA", (2, 2), (255, 255, 255, 0))

    assert set(to_gray(image).getdata()) == {0}


def test_opaque_alpha_is_ignored():
    image = Image.new("RGBA", (2, 2), (100, 100, 100, 255))

    assert set(to_gray(image).getdata()) == {100}


def test_gray_with_alpha():
    image = Image.new("LA", (2, 2), (200, 255))

    assert set(to_gray(image).getdata()) == {200}


def test_bilevel_mode():
    image = Image.new("1", (2, 2), 1)

    assert set(to_gray(image).getdata()) == {255}


def test_sixteen_bit_keeps_high_byte():
    image = Image.fromarray(np.full((2, 3), 0x1234, dtype=np.uint16))

    gray = to_gray(image)

    assert gray.mode == "L"
    assert set(gray.getdata()) == {0x12}


def test_float_mode_is_rounded_and_clipped():
    image = Image.fromarray(np.array([[12.6, 300.0, -5.0]], dtype=np.float32))

    assert list(to_gray(image).getdata()) == [13, 255, 0]


def test_unknown_luma_is_rejected(halves_image):
    with pytest.raises(ValueError, match="Unknown luma"):
        to_gray(halves_image, "rec2020")


def test_transparency_key_on_grayscale_reads_as_black():
    image = Image.fromarray(np.array([[20, 100], [20, 200]], dtype=np.uint8))
    image.info["transparency"] = 20

    gray = to_gray(image)

    assert list(gray.getdata()) == [0, 100, 0, 200]
    assert "transparency" not in gray.info


def test_transparency_key_on_sixteen_bit_reads_as_black():
    image = Image.fromarray(np.array([[0x1400, 0x6400]], dtype=np.uint16))
    image.info["transparency"] = 0x1400

    assert list(to_gray(image).getdata()) == [0, 0x64]


def test_transparency_key_on_rgb_reads_as_black():
    image = Image.new("RGB", (2, 1), (255, 255, 255))
    image.putpixel((1, 0), (100, 100, 100))
    image.info["transparency"] = (255, 255, 255)

    gray = to_gray(image)

    assert list(gray.getdata()) == [0, 100]
    assert "transparency" not in gray.info


@pytest.mark.parametrize("luma", ["rec601", "rec709"])
def test_color_metadata_is_not_carried_over(halves_image, luma):
    image = halves_image.copy()
    image.info["icc_profile"] = b"rgb profile"

    assert "icc_profile" not in to_gray(image, luma).info


def test_passthrough_drops_metadata(random_gray):
    image = random_gray.copy()
    image.info["icc_profile"] = b"gray profile"

    gray = to_gray(image)

    assert gray.info == {}
    assert gray.tobytes() == random_gray.tobytes()
