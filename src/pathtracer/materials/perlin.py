# materials/perlin.py
import math
from typing import Optional

import numpy as np

from pathtracer.core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient noise over a lattice of random unit vectors.

    The lattice is hashed through three independent permutations of
    ``POINT_COUNT`` entries, one per axis. Values are roughly in [-1, 1].
    """
    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)

        vectors = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        # Plain Python lists are much faster than numpy for scalar indexing.
        self.ranvec = [Vector3(*v) for v in vectors.tolist()]
        self.perm_x = rng.permutation(POINT_COUNT).tolist()
        self.perm_y = rng.permutation(POINT_COUNT).tolist()
        self.perm_z = rng.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        mask = POINT_COUNT - 1
        c = [[[None, None], [None, None]], [[None, None], [None, None]]]
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    c[di][dj][dk] = self.ranvec[
                        self.perm_x[(i + di) & mask]
                        ^ self.perm_y[(j + dj) & mask]
                        ^ self.perm_z[(k + dk) & mask]
                    ]
        return _trilinear_interp(c, u, v, w)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of ``depth`` octaves, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)


def _trilinear_interp(c, u: float, v: float, w: float) -> float:
    # Hermite smoothing removes the grid artifacts of plain linear blending.
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for i in range(2):
        for j in range(2):
            for k in range(2):
                weight_v = Vector3(u - i, v - j, w - k)
                accum += ((i * uu + (1 - i) * (1 - uu))
                          * (j * vv + (1 - j) * (1 - vv))
                          * (k * ww + (1 - k) * (1 - ww))
                          * c[i][j][k].dot(weight_v))
    return accum
