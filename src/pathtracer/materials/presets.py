from typing import Optional

from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, NoiseTexture


class ColorPresets:
    """Common color presets for materials."""

    # Cornell box walls
    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)

    BLACK = Vector3(0.0, 0.0, 0.0)
    GROUND = Vector3(0.48, 0.83, 0.53)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)

    # Background radiance
    SKY = Vector3(0.70, 0.80, 1.00)


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def bronze() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.9), fuzz=1.0)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class LightPresets:
    """Predefined light sources."""

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)


class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None,
                     frequency: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.CHECKER_DARK
        if color2 is None:
            color2 = ColorPresets.CHECKER_LIGHT
        return CheckerTexture(color1, color2, frequency)

    @staticmethod
    def marble(scale: float = 4.0, seed: Optional[int] = None) -> NoiseTexture:
        """Turbulent marble veins; larger ``scale`` means tighter bands."""
        return NoiseTexture(scale, seed)
