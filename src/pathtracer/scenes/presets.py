# scenes/presets.py
"""
Demo scenes. Every builder takes a ``random.Random`` (used for scene layout,
noise seeds and BVH axis choices) and returns a :class:`Scene` whose world
is a BVH root.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.block import Block
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import (ColorPresets, DielectricPresets, LightPresets,
                                          MetalPresets, TexturePresets)
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import ImageTexture, Texture

logger = logging.getLogger(__name__)

UP = Vector3(0, 1, 0)


@dataclass
class Scene:
    """Everything the renderer needs besides the image settings."""
    world: Hittable
    camera: Camera
    background: Optional[Vector3] = None
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100


def _seed(rng: random.Random) -> int:
    return rng.randrange(2 ** 32)


def _earth_texture(texture_path: Optional[str]) -> Texture:
    if texture_path is None:
        logger.warning("No texture given for the earth; rendering the placeholder color")
        return ImageTexture()
    return load_texture(texture_path)


def _finish(objects: HittableList, rng: random.Random) -> Hittable:
    logger.info("Scene has %d top-level objects", len(objects))
    return objects.build_bvh(0.0, 1.0, rng)


def random_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    """The book cover: a field of small random spheres around three large ones."""
    world = HittableList()

    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze()))

    aspect_ratio = 16.0 / 9.0
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                    aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)
    return Scene(_finish(world, rng), camera, ColorPresets.SKY, aspect_ratio)


def two_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    checker = TexturePresets.checkerboard()
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)),
    ])
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, 16.0 / 9.0)
    return Scene(_finish(world, rng), camera, ColorPresets.SKY)


def two_perlin_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    marble = TexturePresets.marble(4.0, _seed(rng))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)),
    ])
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, 16.0 / 9.0)
    return Scene(_finish(world, rng), camera, ColorPresets.SKY)


def earth(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    globe = Sphere(Vector3(0, 0, 0), 2, Lambertian(_earth_texture(texture_path)))
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, 16.0 / 9.0)
    return Scene(_finish(HittableList([globe]), rng), camera, ColorPresets.SKY)


def simple_light(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    marble = TexturePresets.marble(4.0, _seed(rng))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)),
        XYRect(3, 5, 1, 3, -2, LightPresets.daylight(4)),
    ])
    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), UP, 20.0, 16.0 / 9.0)
    return Scene(_finish(world, rng), camera, ColorPresets.BLACK, samples_per_pixel=400)


def _cornell_walls(light: DiffuseLight, light_rect, white: Lambertian) -> HittableList:
    red = Lambertian(ColorPresets.RED)
    green = Lambertian(ColorPresets.GREEN)

    walls = HittableList()
    walls.add(YZRect(0, 555, 0, 555, 555, green))
    walls.add(YZRect(0, 555, 0, 555, 0, red))
    walls.add(XZRect(*light_rect, light))
    walls.add(XZRect(0, 555, 0, 555, 0, white))
    walls.add(XZRect(0, 555, 0, 555, 555, white))
    walls.add(XYRect(0, 555, 0, 555, 555, white))
    return walls


def _cornell_blocks(material) -> tuple:
    tall = Block(Vector3(0, 0, 0), Vector3(165, 330, 165), material)
    tall = Translate(RotateY(tall, 15), Vector3(265, 0, 295))

    short = Block(Vector3(0, 0, 0), Vector3(165, 165, 165), material)
    short = Translate(RotateY(short, -18), Vector3(130, 0, 65))
    return tall, short


def _cornell_camera() -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), UP, 40.0, 1.0)


def cornell_box(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    white = Lambertian(ColorPresets.WHITE)
    world = _cornell_walls(LightPresets.daylight(15), (213, 343, 227, 332, 554), white)
    for block in _cornell_blocks(white):
        world.add(block)
    return Scene(_finish(world, rng), _cornell_camera(), ColorPresets.BLACK,
                 aspect_ratio=1.0, samples_per_pixel=200)


def cornell_smoke(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    white = Lambertian(ColorPresets.WHITE)
    world = _cornell_walls(LightPresets.daylight(7), (113, 443, 127, 432, 554), white)
    tall, short = _cornell_blocks(white)
    world.add(ConstantMedium(tall, 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Vector3(1, 1, 1)))
    return Scene(_finish(world, rng), _cornell_camera(), ColorPresets.BLACK,
                 aspect_ratio=1.0, samples_per_pixel=200)


def final_scene(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    """Every feature at once: instancing, media, motion blur, textures."""
    ground = Lambertian(ColorPresets.GROUND)
    boxes1 = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.add(Block(Vector3(x0, 0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    objects = HittableList()
    objects.add(boxes1.build_bvh(0.0, 1.0, rng))

    objects.add(XZRect(123, 423, 147, 412, 554, LightPresets.daylight(7)))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.add(MovingSphere(center1, center2, 0, 1, 50, Lambertian(Vector3(0.7, 0.3, 0.1))))

    objects.add(Sphere(Vector3(260, 150, 45), 50, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(0, 150, 145), 50, MetalPresets.brushed_metal()))

    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    haze = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    objects.add(ConstantMedium(haze, 0.0001, Vector3(1, 1, 1)))

    objects.add(Sphere(Vector3(400, 200, 400), 100, Lambertian(_earth_texture(texture_path))))
    objects.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(TexturePresets.marble(0.1, _seed(rng)))))

    boxes2 = HittableList()
    white = Lambertian(ColorPresets.WHITE)
    for _ in range(1000):
        boxes2.add(Sphere(random_vector(rng, 0, 165), 10, white))
    objects.add(Translate(RotateY(boxes2.build_bvh(0.0, 1.0, rng), 15), Vector3(-100, 270, 395)))

    camera = Camera(Vector3(478, 278, -600), Vector3(278, 278, 0), UP, 40.0, 1.0,
                    time0=0.0, time1=1.0)
    return Scene(_finish(objects, rng), camera, ColorPresets.BLACK,
                 aspect_ratio=1.0, samples_per_pixel=1000)


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def build_scene(name: str, rng: Optional[random.Random] = None,
                texture_path: Optional[str] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; known scenes: {', '.join(sorted(SCENES))}") from None
    if rng is None:
        rng = random.Random()
    logger.info("Building scene %s", name)
    return builder(rng, texture_path)
