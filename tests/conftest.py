"""Shared fixtures for the path tracer tests."""

import random

import pytest

from core.vector import Color


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def gray():
    from materials.lambertian import Lambertian

    return Lambertian(Color(0.5, 0.5, 0.5))
