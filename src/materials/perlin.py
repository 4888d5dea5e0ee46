# materials/perlin.py
import math
import random
from typing import List
from core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient (Perlin) noise over 3D points.

    Each lattice corner gets one of POINT_COUNT random unit gradients chosen
    by xor-ing three independent permutation tables.
    """
    def __init__(self, rng: random.Random):
        self.ranvec: List[Vector3] = [
            Vector3.random(rng, -1.0, 1.0).normalize() for _ in range(POINT_COUNT)
        ]
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @staticmethod
    def _generate_perm(rng: random.Random) -> List[int]:
        p = list(range(POINT_COUNT))
        rng.shuffle(p)
        return p

    def noise(self, p: Vector3) -> float:
        """Smoothly varying value in roughly [-1, 1]."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing removes grid artifacts.
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    gradient = self.ranvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * gradient.dot(weight))
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` noise octaves, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)
