"""Tests for radiance estimation along rays."""

import random

import pytest

from core.ray import Ray
from core.vector import Color, Vector3
from geometry.aarect import XZRect
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from materials.metal import Metal
from renderer.integrator import normal_color, ray_color, sky_gradient
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scenes import two_unit_spheres

BACKGROUND = Color(0.5, 0.7, 1.0)


class TestRayColor:
    """Tests for the recursive path estimator."""

    def test_no_depth_is_black(self, gray, rng):
        world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, gray)])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, BACKGROUND, world, 0, rng).to_tuple() == (0, 0, 0)

    def test_miss_returns_background(self, gray, rng):
        world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, gray)])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert ray_color(ray, BACKGROUND, world, 10, rng).to_tuple() == BACKGROUND.to_tuple()

    def test_light_returns_emission(self, rng):
        world = HittableList([Sphere(Vector3(0, 0, -3), 1, DiffuseLight(Color(4, 4, 4)))])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, Color(0, 0, 0), world, 10, rng).to_tuple() == (4, 4, 4)

    def test_mirror_attenuates_background(self, rng):
        floor = XZRect(-100, 100, -100, 100, 0, Metal(Color(0.8, 0.8, 0.8)))
        world = HittableList([floor])
        ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        color = ray_color(ray, BACKGROUND, world, 5, rng)
        assert color.to_tuple() == pytest.approx((0.4, 0.56, 0.8))

    def test_mirror_runs_out_of_depth(self, rng):
        floor = XZRect(-100, 100, -100, 100, 0, Metal(Color(0.8, 0.8, 0.8)))
        ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        assert ray_color(ray, BACKGROUND, HittableList([floor]), 1, rng).to_tuple() == (0, 0, 0)

    def test_enclosed_diffuse_path_without_light_is_black(self, gray, rng):
        # Inside a sphere every path bounces until depth runs out.
        world = HittableList([Sphere(Vector3(0, 0, 0), 5, gray)])
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0.2, 0))
        assert ray_color(ray, BACKGROUND, world, 20, rng).to_tuple() == (0, 0, 0)


class TestNormalShading:
    """Tests for the normal-visualizing debug shader."""

    def test_hit_maps_normal_into_unit_cube(self, gray, rng):
        world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, gray)])
        color = normal_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, rng)
        assert color.to_tuple() == pytest.approx((0.5, 0.5, 1.0))

    def test_miss_shows_sky(self, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert normal_color(ray, HittableList(), rng).to_tuple() == pytest.approx((0.5, 0.7, 1.0))
        assert sky_gradient(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0))).to_tuple() == (1, 1, 1)


class TestEndToEnd:
    """Tests rendering the two-sphere scene without randomness."""

    def test_center_pixel_sees_sphere_normal(self):
        scene = two_unit_spheres(random.Random(0))
        camera = scene.camera(aspect_ratio=1.0)
        center = camera.get_ray(0.5, 0.5, random.Random(0))
        rec = scene.world.hit(center, 0.001, float("inf"))
        assert rec.t == pytest.approx(0.5)
        assert rec.p.to_tuple() == pytest.approx((0, 0, 0.5))

        settings = RenderSettings(image_width=3, aspect_ratio=1.0, samples_per_pixel=1,
                                  jitter=False, shading="normals")
        image = Renderer(settings).render(camera, scene.world)
        assert image.shape == (3, 3, 3)
        assert tuple(image[1, 1]) == pytest.approx((0.5, 0.5, 1.0))
