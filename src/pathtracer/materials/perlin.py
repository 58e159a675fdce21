# materials/perlin.py
import math

import numpy as np

from pathtracer.core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Lattice-gradient (Perlin) noise in 3D.

    Gradients and permutation tables are drawn once from a seeded numpy
    generator, so two Perlin objects built with the same seed are identical
    and evaluation never touches a random source.
    """
    def __init__(self, seed: int = 0):
        rng = np.random.default_rng(seed)
        gradients = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(gradients, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        gradients = gradients / norms
        self.ranvec = [Vector3(float(g[0]), float(g[1]), float(g[2])) for g in gradients]
        self.perm_x = rng.permutation(POINT_COUNT).tolist()
        self.perm_y = rng.permutation(POINT_COUNT).tolist()
        self.perm_z = rng.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        """Noise value in roughly [-1, 1]."""
        fx = math.floor(p.x)
        fy = math.floor(p.y)
        fz = math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i = int(fx)
        j = int(fy)
        k = int(fz)

        c = [[[None, None], [None, None]], [[None, None], [None, None]]]
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    c[di][dj][dk] = self.ranvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
        return _trilinear_interp(c, u, v, w)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of |noise| octaves at doubling frequency and halving weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)


def _trilinear_interp(c, u: float, v: float, w: float) -> float:
    # Hermite smoothing hides the lattice grid.
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
