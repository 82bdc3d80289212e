# geometry/medium.py
import math
import random
from typing import Optional, Union

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

# Gap between the entry and exit searches so the exit test skips the entry point.
EXIT_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (fog, smoke) filling a boundary shape.

    A ray travelling through the boundary scatters after an exponentially
    distributed free-flight distance, or passes straight through if that
    distance is longer than the path inside the boundary. The boundary must
    be convex for the entry/exit search to be meaningful.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Vector3, Texture], rng: Optional[random.Random] = None):
        if density <= 0:
            raise ValueError(f"ConstantMedium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        self.rng = rng if rng is not None else random.Random()

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            rng = self.rng

        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None

        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None

        # Origin already inside the medium.
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() is in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())

        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True          # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)

    def __repr__(self) -> str:
        return f"ConstantMedium({self.boundary!r}, density={self.density})"
