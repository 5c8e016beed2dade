# materials/perlin.py
import math

import numpy as np
from numba import njit

POINT_COUNT = 256


@njit
def _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    u = x - math.floor(x)
    v = y - math.floor(y)
    w = z - math.floor(z)
    i = int(math.floor(x))
    j = int(math.floor(y))
    k = int(math.floor(z))

    # Hermite smoothing of the interpolation weights
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                weight = ((u - di) * gx + (v - dj) * gy + (w - dk) * gz)
                accum += ((di * uu + (1 - di) * (1.0 - uu)) *
                          (dj * vv + (1 - dj) * (1.0 - vv)) *
                          (dk * ww + (1 - dk) * (1.0 - ww)) * weight)
    return accum


@njit
def _perlin_turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient (Perlin) noise over a 256-entry lattice of random unit vectors
    and three random permutation tables. The tables are plain numpy arrays so
    the lattice evaluation runs as compiled code.
    """
    def __init__(self, seed=None):
        rng = np.random.default_rng(seed)
        ranvec = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(ranvec, axis=1, keepdims=True)
        self.ranvec = ranvec / np.where(norms == 0, 1.0, norms)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p) -> float:
        """Noise value in roughly [-1, 1] at point p."""
        return float(_perlin_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                   float(p.x), float(p.y), float(p.z)))

    def turb(self, p, depth: int = 7) -> float:
        """Sum of ``depth`` octaves of noise, as an absolute value."""
        return float(_perlin_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                        float(p.x), float(p.y), float(p.z), depth))
