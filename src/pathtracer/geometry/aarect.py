# geometry/aarect.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis of a rectangle's bounding box.
BOX_PADDING = 0.0001


def _compose(a_axis: int, b_axis: int, a: float, b: float, k: float) -> Vector3:
    """Builds a point from its two in-plane coordinates and the plane offset k."""
    coords = [k, k, k]
    coords[a_axis] = a
    coords[b_axis] = b
    return Vector3(*coords)


class AARect(Hittable):
    """
    Rectangle lying in the plane ``coordinate[k_axis] == k`` and spanning
    [a0, a1] x [b0, b1] along the two remaining axes.

    Use the concrete XYRect, XZRect and YZRect classes.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d_k = ray.direction[self.k_axis]
        if d_k == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.k_axis]) / d_k
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.t = t
        outward_normal = _compose(self.a_axis, self.b_axis, 0.0, 0.0, 1.0)
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        # Padded along the flat axis so the box never has zero thickness.
        return AABB(
            _compose(self.a_axis, self.b_axis, self.a0, self.b0, self.k - BOX_PADDING),
            _compose(self.a_axis, self.b_axis, self.a1, self.b1, self.k + BOX_PADDING),
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")


class XYRect(AARect):
    """Rectangle in the plane z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AARect):
    """Rectangle in the plane y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AARect):
    """Rectangle in the plane x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
