# src/geometry/bvh.py
import logging
import random
from typing import List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import BoundingBoxError, Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BoundingBoxError(obj)
    return box


class BVHNode(Hittable):
    """
    Node of a bounding volume hierarchy over ``objects[start:end]``.

    Each level splits along a randomly chosen axis: the slice is sorted by
    the minimum corner of each object's box on that axis and cut at the
    midpoint. The slice is reordered in place. A single object becomes both
    children; two objects are ordered without recursing.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None):
        if rng is None:
            rng = random.Random()
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        axis = rng.randrange(3)

        def key(obj):
            return _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            a, b = objects[start], objects[start + 1]
            if key(b) < key(a):
                a, b = b, a
            self.left, self.right = a, b
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    @classmethod
    def from_list(cls, objects: List[Hittable], time0: float = 0.0, time1: float = 1.0,
                  rng: Optional[random.Random] = None) -> "BVHNode":
        """Builds a tree over the whole list, reordering it in place."""
        root = cls(objects, 0, len(objects), time0, time1, rng)
        logger.debug("Built BVH over %d objects (%d nodes)", len(objects), root.node_count())
        return root

    def node_count(self) -> int:
        return 1 + sum(child.node_count() for child in (self.left, self.right)
                       if isinstance(child, BVHNode))

    def depth(self) -> int:
        return 1 + max(child.depth() if isinstance(child, BVHNode) else 0
                       for child in (self.left, self.right))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # Only a strictly closer hit can come from the right.
        if hit_left is not None:
            t_max = hit_left.t

        # A single-object node aliases the same child on both sides.
        hit_right = self.right.hit(ray, t_min, t_max, rng) if self.right is not self.left else None

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

    def __repr__(self) -> str:
        return f"BVHNode({self.box!r})"
