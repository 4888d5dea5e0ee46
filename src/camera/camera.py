import math
import random
from core.vector import Vector3, Point3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk


class Camera:
    """
    Thin-lens camera looking from `lookfrom` towards `lookat`.

    vfov is the vertical field of view in degrees. An aperture of 0 gives a
    pinhole camera; otherwise ray origins are spread over a lens disk and
    objects at `focus_dist` are in focus. Ray times are drawn uniformly from
    the shutter interval [time0, time1].
    """
    def __init__(self, lookfrom: Point3, lookat: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 0.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = degrees_to_radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError("Camera lookfrom and lookat must differ")
        # w points backwards, away from the view direction
        self.w = view.normalize()
        side = self.vup.cross(self.w)
        if side.near_zero():
            raise ValueError("Camera vup must not be parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.lookfrom
        # Scale by focus distance
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Generates the ray through viewport coordinates (s, t) in [0,1]^2."""
        origin = self.origin
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)
        return Ray(origin, direction, time)
