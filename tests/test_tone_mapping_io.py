"""Tests for gamma correction, quantization and image output."""

import math

import numpy as np
import pytest
from PIL import Image

from pathtracer.renderer.image_io import encode_ppm, save_image, write_ppm
from pathtracer.renderer.tone_mapping import gamma_correct, quantize


class TestGammaCorrect:
    """Tests for the gamma kernel."""

    def test_gamma_two_is_square_root(self):
        """gamma=2 takes the square root of each component."""
        linear = np.array([[[0.25, 0.5, 0.0]]])
        out = gamma_correct(linear)
        assert out[0, 0, 0] == 0.5
        assert out[0, 0, 1] == math.sqrt(0.5)
        assert out[0, 0, 2] == 0.0

    def test_invalid_components(self):
        """NaN and negative values go to 0, values above 1 clamp to 1."""
        linear = np.array([[[float("nan"), -3.0, 4.0]]])
        assert gamma_correct(linear).tolist() == [[[0.0, 0.0, 1.0]]]

    def test_other_gamma(self):
        """Other exponents use a power law."""
        out = gamma_correct(np.full((2, 2, 3), 0.5), gamma=2.2)
        assert out[1, 1, 2] == pytest.approx(0.5 ** (1 / 2.2))

    def test_input_untouched(self):
        """The linear buffer is not modified in place."""
        linear = np.full((1, 2, 3), 0.25)
        gamma_correct(linear)
        assert np.all(linear == 0.25)

    def test_non_positive_gamma(self):
        """gamma must be positive."""
        with pytest.raises(ValueError):
            gamma_correct(np.zeros((1, 1, 3)), gamma=0.0)


class TestQuantize:
    """Tests for 8-bit conversion."""

    def test_levels(self):
        """Channels map to int(256 * clamp(v, 0, 0.999))."""
        image = np.array([[[0.0, 0.5, 1.0], [-1.0, 0.999, 2.0]]])
        out = quantize(image)
        assert out.dtype == np.uint8
        assert out.tolist() == [[[0, 128, 255], [0, 255, 255]]]


class TestImageOutput:
    """Tests for PPM encoding and file output."""

    def test_encode_ppm(self):
        """Header, then one triple per line starting at the top-left pixel."""
        image = np.array([[[255, 0, 0], [0, 255, 0]],
                          [[0, 0, 255], [10, 20, 30]]], dtype=np.uint8)
        assert encode_ppm(image) == (
            "P3\n2 2\n255\n"
            "255 0 0\n0 255 0\n"
            "0 0 255\n10 20 30\n"
        )

    def test_encode_float_image(self):
        """Float images are quantized on the way out."""
        text = encode_ppm(np.full((1, 1, 3), 1.0))
        assert text.splitlines() == ["P3", "1 1", "255", "255 255 255"]

    def test_rejects_bad_shape(self):
        """Images must be (height, width, 3)."""
        with pytest.raises(ValueError):
            encode_ppm(np.zeros((2, 2)))

    def test_write_ppm(self, tmp_path):
        """The PPM writer produces a file Pillow can read back."""
        image = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
        path = tmp_path / "out.ppm"
        write_ppm(str(path), image)
        with Image.open(path) as img:
            assert img.size == (2, 1)
            assert np.array(img).tolist() == image.tolist()

    @pytest.mark.parametrize("name", ["out.png", "out.ppm"])
    def test_save_image(self, tmp_path, name):
        """save_image dispatches on the extension and preserves pixels."""
        rng = np.random.default_rng(3)
        image = rng.random((3, 4, 3))
        path = tmp_path / name
        save_image(str(path), image)
        with Image.open(path) as img:
            assert np.array(img.convert("RGB")).tolist() == quantize(image).tolist()
