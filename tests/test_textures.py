"""Unit tests for textures and texture loading.

Tests cover:
- Solid and checker textures
- Perlin noise and the marble noise texture
- Image textures: V flip, clamping and the missing-data color
- Loading textures from disk with Pillow
"""

import numpy as np
import pytest
from PIL import Image

from conftest import assert_vec_close
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import (CheckerTexture, ImageTexture, NoiseTexture,
                                           SolidTexture, as_texture)

RED = Vector3(1, 0, 0)
BLUE = Vector3(0, 0, 1)


@pytest.fixture
def quad_image():
    """2x2 image: red, green on top; blue, white on the bottom."""
    return np.array([
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        [[0.0, 0.0, 1.0], [1.0, 1.0, 1.0]],
    ])


class TestSimpleTextures:
    """Tests for solid and checker textures."""

    def test_solid(self):
        texture = SolidTexture(RED)
        assert texture.sample(0.3, 0.9, Vector3(5, 5, 5)) == RED

    def test_as_texture_wraps_colors(self):
        assert isinstance(as_texture(RED), SolidTexture)
        checker = CheckerTexture(RED, BLUE)
        assert as_texture(checker) is checker

    def test_checker_sign(self):
        checker = CheckerTexture(RED, BLUE)
        assert checker.sample(0, 0, Vector3(0.1, 0.1, 0.1)) == BLUE
        assert checker.sample(0, 0, Vector3(-0.1, 0.1, 0.1)) == RED

    def test_checker_nests_textures(self):
        """The odd branch delegates to a finer checker sampled at the same point."""
        inner = CheckerTexture(Vector3(0, 1, 0), Vector3(1, 1, 0), frequency=40.0)
        checker = CheckerTexture(inner, BLUE)
        assert checker.sample(0, 0, Vector3(-0.1, 0.1, 0.1)) == Vector3(1, 1, 0)


class TestNoise:
    """Tests for Perlin noise."""

    def test_zero_at_lattice_points(self):
        noise = Perlin(seed=3)
        for p in [(0, 0, 0), (1, 2, 3), (-4, 7, 250), (300, -1, 0)]:
            assert abs(noise.noise(Vector3(*p))) < 1e-12

    def test_seed_is_deterministic(self):
        p = Vector3(0.3, 1.7, -2.2)
        assert Perlin(seed=8).noise(p) == Perlin(seed=8).noise(p)
        assert Perlin(seed=8).noise(p) != Perlin(seed=9).noise(p)

    def test_noise_is_bounded(self, rng):
        noise = Perlin(seed=1)
        for _ in range(300):
            p = Vector3(rng.uniform(-20, 20), rng.uniform(-20, 20), rng.uniform(-20, 20))
            assert -1.8 <= noise.noise(p) <= 1.8
            assert noise.turb(p) >= 0.0

    def test_noise_texture_in_unit_range(self, rng):
        texture = NoiseTexture(scale=4.0, seed=2)
        for _ in range(200):
            p = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
            color = texture.sample(0, 0, p)
            assert 0.0 <= color.x <= 1.0
            assert color.x == color.y == color.z


class TestImageTexture:
    """Tests for sampling image data."""

    def test_v_is_flipped(self, quad_image):
        texture = ImageTexture(quad_image)
        assert_vec_close(texture.sample(0.0, 1.0, Vector3()), (1, 0, 0))
        assert_vec_close(texture.sample(0.9, 1.0, Vector3()), (0, 1, 0))
        assert_vec_close(texture.sample(0.0, 0.0, Vector3()), (0, 0, 1))
        assert_vec_close(texture.sample(1.0, 0.0, Vector3()), (1, 1, 1))

    def test_coordinates_are_clamped(self, quad_image):
        texture = ImageTexture(quad_image)
        assert_vec_close(texture.sample(-3.0, 7.0, Vector3()), (1, 0, 0))
        assert_vec_close(texture.sample(5.0, -1.0, Vector3()), (1, 1, 1))

    def test_missing_data_is_cyan(self):
        assert ImageTexture().sample(0.5, 0.5, Vector3()) == Vector3(0, 1, 1)

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros((4, 4)))

    @pytest.mark.parametrize("shape", [(0, 0, 3), (0, 4, 3), (4, 0, 3)])
    def test_rejects_empty_image(self, shape):
        with pytest.raises(ValueError, match="at least one pixel"):
            ImageTexture(np.zeros(shape))


class TestTextureLoader:
    """Tests for loading images from disk."""

    def test_load_png(self, tmp_path):
        pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                           [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
        path = tmp_path / "quad.png"
        Image.fromarray(pixels).save(path)

        texture = load_texture(str(path))
        assert (texture.width, texture.height) == (2, 2)
        assert_vec_close(texture.sample(0.0, 1.0, Vector3()), (1, 0, 0))
        assert_vec_close(texture.sample(0.0, 0.0, Vector3()), (0, 0, 1))

    def test_grayscale_is_converted(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.fromarray(np.full((3, 3), 128, dtype=np.uint8)).save(path)
        color = load_texture(str(path)).sample(0.5, 0.5, Vector3())
        assert_vec_close(color, (128 / 255, 128 / 255, 128 / 255))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "junk.png"
        path.write_text("definitely not a png")
        with pytest.raises(ValueError):
            load_texture(str(path))
