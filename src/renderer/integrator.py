# renderer/integrator.py
import math
import random
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable

# Lower bound on hit distance; avoids re-hitting the surface a ray just left.
T_MIN = 0.001


def ray_color(ray: Ray, background: Color, world: Hittable, depth: int,
              rng: random.Random) -> Color:
    """
    Radiance arriving along `ray`.

    Adds the material's emission at each hit to the attenuated radiance of
    the scattered ray, recursing at most `depth` times. Rays that leave the
    scene see the constant background color; running out of depth yields black.
    """
    if depth <= 0:
        return Color(0, 0, 0)

    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec.uv, rec.p)
    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return emitted

    scattered_ray, attenuation = scattered
    return emitted + attenuation * ray_color(scattered_ray, background, world, depth - 1, rng)


def sky_gradient(ray: Ray) -> Color:
    """Vertical white-to-blue blend used for daylight backdrops."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Color(1.0, 1.0, 1.0) * (1.0 - t) + Color(0.5, 0.7, 1.0) * t


def normal_color(ray: Ray, world: Hittable, rng: random.Random) -> Color:
    """
    Debug shading: maps the unit normal of the nearest hit into [0,1]^3, or
    the sky gradient on a miss. Only participating media draw from rng.
    """
    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return sky_gradient(ray)
    n = rec.normal.normalize()
    return Color(n.x + 1, n.y + 1, n.z + 1) * 0.5
