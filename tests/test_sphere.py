"""Tests for static and moving sphere intersection."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import MovingSphere, Sphere, get_sphere_uv


@pytest.fixture
def sphere(gray):
    return Sphere(Vector3(0, 0, 0), 1.0, gray)


@pytest.fixture
def ray():
    # Roots at t=4 and t=6.
    return Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))


class TestSphereHit:
    """Tests for root selection against the [t_min, t_max] interval."""

    def test_nearest_root_reported(self, sphere, ray):
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)
        assert rec.p.to_tuple() == pytest.approx((0, 0, -1))
        assert rec.front_face
        assert rec.normal.to_tuple() == pytest.approx((0, 0, -1))

    def test_far_root_when_near_excluded(self, sphere, ray):
        rec = sphere.hit(ray, 5.0, math.inf)
        assert rec.t == pytest.approx(6.0)
        # Hit from inside: normal flipped against the ray.
        assert not rec.front_face
        assert rec.normal.to_tuple() == pytest.approx((0, 0, -1))

    @pytest.mark.parametrize("t_min,t_max", [(0.0, 3.9), (4.5, 5.5), (6.1, math.inf)])
    def test_interval_excluding_both_roots(self, sphere, ray, t_min, t_max):
        assert sphere.hit(ray, t_min, t_max) is None

    def test_miss(self, sphere):
        ray = Ray(Vector3(0, 2, -5), Vector3(0, 0, 1))
        assert sphere.hit(ray, 0.0, math.inf) is None

    def test_unnormalized_direction(self, sphere):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 2))
        assert sphere.hit(ray, 0.0, math.inf).t == pytest.approx(2.0)

    def test_material_attached(self, sphere, ray, gray):
        assert sphere.hit(ray, 0.0, math.inf).material is gray

    def test_invalid_radius(self, gray):
        with pytest.raises(ValueError):
            Sphere(Vector3(0, 0, 0), 0.0, gray)

    def test_bounding_box(self, gray):
        box = Sphere(Vector3(1, 2, 3), 0.5, gray).bounding_box(0, 1)
        assert box.minimum.to_tuple() == (0.5, 1.5, 2.5)
        assert box.maximum.to_tuple() == (1.5, 2.5, 3.5)


class TestSphereUV:
    """Tests for the spherical surface parameterization."""

    def test_front_point(self):
        uv = get_sphere_uv(Vector3(0, 0, -1))
        assert uv.u == pytest.approx(0.75)
        assert uv.v == pytest.approx(0.5)

    def test_poles(self):
        assert get_sphere_uv(Vector3(0, -1, 0)).v == pytest.approx(0.0)
        assert get_sphere_uv(Vector3(0, 1, 0)).v == pytest.approx(1.0)

    def test_hit_record_carries_uv(self, sphere, ray):
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec.uv.u == pytest.approx(0.75)
        assert rec.uv.v == pytest.approx(0.5)


class TestMovingSphere:
    """Tests for time-interpolated centers."""

    @pytest.fixture
    def moving(self, gray):
        return MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, gray)

    def test_center_interpolates(self, moving):
        assert moving.center(0.5).to_tuple() == (0, 1, 0)

    def test_hit_depends_on_ray_time(self, moving):
        early = Ray(Vector3(0, 2, -5), Vector3(0, 0, 1), time=0.0)
        late = Ray(Vector3(0, 2, -5), Vector3(0, 0, 1), time=1.0)
        assert moving.hit(early, 0.0, math.inf) is None
        assert moving.hit(late, 0.0, math.inf).t == pytest.approx(4.5)

    def test_bounding_box_covers_motion(self, moving):
        box = moving.bounding_box(0.0, 1.0)
        assert box.minimum.to_tuple() == (-0.5, -0.5, -0.5)
        assert box.maximum.to_tuple() == (0.5, 2.5, 0.5)

    def test_empty_time_interval_rejected(self, gray):
        with pytest.raises(ValueError):
            MovingSphere(Vector3(0, 0, 0), Vector3(1, 0, 0), 1.0, 1.0, 0.5, gray)
