# materials/textures.py
import math
from typing import Optional, Union

import numpy as np

from pathtracer.core.utils import clamp
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin


class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at the given UV coordinates and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"


class CheckerTexture(Texture):
    """
    A 3D checker pattern. The sign of sin(f x) sin(f y) sin(f z) picks the
    odd texture when negative and the even one otherwise.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 frequency: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.frequency = frequency

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        f = self.frequency
        sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.sample(u, v, p)
        return self.even.sample(u, v, p)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.noise = Perlin(seed)
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Vector3(1, 1, 1) * value


class ImageTexture(Texture):
    """
    A texture backed by an (height, width, 3) array of RGB values in [0, 1].
    Row 0 is the top of the image. Use texture_loader.load_texture to read
    one from disk.
    """
    def __init__(self, data: Optional[np.ndarray] = None):
        if data is not None:
            data = np.asarray(data, dtype=np.float64)
            if data.ndim != 3 or data.shape[2] < 3:
                raise ValueError(f"ImageTexture expects (height, width, 3) data, got {data.shape}")
            self.height, self.width = data.shape[:2]
            if self.height == 0 or self.width == 0:
                raise ValueError(f"ImageTexture needs at least one pixel, got {data.shape}")
            # Nested lists make per-pixel lookups cheap in the render loop.
            self.data = data[:, :, :3].tolist()
        else:
            self.data = None
            self.width = self.height = 0

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        # Cyan makes missing texture data obvious in a render.
        if self.data is None:
            return Vector3(0, 1, 1)

        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V: image rows run top to bottom

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        color = self.data[j][i]
        return Vector3(color[0], color[1], color[2])
