# core/utils.py
import math
import random
from core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(x, hi))


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Reject points too close to the center to normalize reliably.
        if p.length_squared() > 1e-160:
            return p.normalize()


def random_in_unit_disk(rng: random.Random) -> Vector3:
    """
    Returns a random point in the unit disk on the z=0 plane, for lens sampling.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.

    The caller is responsible for checking total internal reflection first.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel
