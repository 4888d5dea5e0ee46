"""Tests for vector arithmetic and the sampling helpers in core.utils."""

import math
import random

import pytest

from core.ray import Ray
from core.utils import (
    clamp,
    degrees_to_radians,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
)
from core.vector import Vector3


class TestVector3:
    """Tests for componentwise arithmetic."""

    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert (a + b).to_tuple() == (5, 7, 9)
        assert (b - a).to_tuple() == (3, 3, 3)
        assert (-a).to_tuple() == (-1, -2, -3)

    def test_scalar_and_componentwise_mul(self):
        a = Vector3(1, 2, 3)
        assert (a * 2).to_tuple() == (2, 4, 6)
        assert (2 * a).to_tuple() == (2, 4, 6)
        assert (a * Vector3(2, 0, -1)).to_tuple() == (2, 0, -3)

    def test_iadd_accumulates_in_place(self):
        acc = Vector3()
        acc += Vector3(1, 1, 1)
        acc += Vector3(0.5, 0, 0)
        assert acc.to_tuple() == (1.5, 1, 1)

    def test_dot_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y).to_tuple() == (0, 0, 1)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert [v[0], v[1], v[2]] == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_normalize(self):
        v = Vector3(3, 4, 0).normalize()
        assert v.length() == pytest.approx(1.0)
        assert Vector3(0, 0, 0).normalize().to_tuple() == (0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()

    def test_random_within_range(self, rng):
        for _ in range(100):
            v = Vector3.random(rng, -2, 3)
            assert all(-2 <= c <= 3 for c in v)


class TestSampling:
    """Tests for random direction sampling."""

    def test_unit_sphere_points_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vectors_have_unit_length(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_is_planar(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_same_seed_same_sequence(self):
        a = [random_unit_vector(random.Random(5)).to_tuple() for _ in range(3)]
        b = [random_unit_vector(random.Random(5)).to_tuple() for _ in range(3)]
        assert a == b


class TestReflectRefract:
    """Tests for mirror reflection and Snell refraction."""

    def test_reflect_flips_normal_component(self):
        r = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert r.to_tuple() == (1, 1, 0)

    def test_refract_normal_incidence_goes_straight(self):
        r = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert r.x == pytest.approx(0.0)
        assert r.y == pytest.approx(-1.0)

    def test_refract_obeys_snells_law(self):
        s = 1 / math.sqrt(2)
        r = refract(Vector3(s, -s, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert r.length() == pytest.approx(1.0)
        assert r.x == pytest.approx(s / 1.5)


class TestHelpers:
    def test_degrees_to_radians(self):
        assert degrees_to_radians(180) == pytest.approx(math.pi)

    def test_clamp(self):
        assert clamp(2, 0, 1) == 1
        assert clamp(-2, 0, 1) == 0
        assert clamp(0.5, 0, 1) == 0.5

    def test_ray_at(self):
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 2, 0), time=0.25)
        assert ray.at(1.5).to_tuple() == (1, 3, 0)
        assert ray.time == 0.25
