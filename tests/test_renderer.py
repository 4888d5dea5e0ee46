"""Tests for the renderer, tone mapping and image output."""

import io
import math
import random

import numpy as np
import pytest
from PIL import Image

from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from renderer.image_writer import save_image, write_ppm
from renderer.raytracer import Renderer, render_row, row_rng
from renderer.settings import QUALITY_LEVELS, RenderSettings
from renderer.tone_mapping import gamma_correct, reinhard_tone_mapping
from scenes import two_unit_spheres


@pytest.fixture
def scene():
    return two_unit_spheres(random.Random(0))


def tiny_settings(**kwargs):
    params = dict(image_width=8, aspect_ratio=2.0, samples_per_pixel=2, max_depth=4,
                  background=Color(0.7, 0.8, 1.0), seed=5)
    params.update(kwargs)
    return RenderSettings(**params)


class TestRenderer:
    """Tests for whole-image rendering."""

    def test_output_shape(self, scene):
        settings = tiny_settings()
        image = Renderer(settings).render(scene.camera(2.0), scene.world)
        assert image.shape == (4, 8, 3)
        assert image.dtype == np.float64
        assert np.all(image >= 0)

    def test_same_seed_same_image(self, scene):
        settings = tiny_settings()
        a = Renderer(settings).render(scene.camera(2.0), scene.world)
        b = Renderer(settings).render(scene.camera(2.0), scene.world)
        assert np.array_equal(a, b)

    def test_different_seed_different_image(self, scene):
        a = Renderer(tiny_settings(seed=1)).render(scene.camera(2.0), scene.world)
        b = Renderer(tiny_settings(seed=2)).render(scene.camera(2.0), scene.world)
        assert not np.array_equal(a, b)

    def test_worker_count_does_not_change_image(self, scene):
        serial = Renderer(tiny_settings(workers=1)).render(scene.camera(2.0), scene.world)
        parallel = Renderer(tiny_settings(workers=2)).render(scene.camera(2.0), scene.world)
        assert np.array_equal(serial, parallel)

    def test_rows_stored_top_to_bottom(self, scene):
        settings = tiny_settings()
        camera = scene.camera(2.0)
        image = Renderer(settings).render(camera, scene.world)
        bottom = render_row(camera, scene.world, settings, 0)
        assert np.array_equal(image[-1], bottom)

    def test_row_generators_are_independent(self):
        assert row_rng(7, 3).random() == row_rng(7, 3).random()
        assert row_rng(7, 3).random() != row_rng(7, 4).random()

    def test_single_pixel_image(self):
        world = HittableList([Sphere(Vector3(0, 0, -2), 1, Lambertian(Color(0.5, 0.5, 0.5)))])
        from camera.camera import Camera

        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0)
        settings = RenderSettings(image_width=1, aspect_ratio=1.0, samples_per_pixel=1,
                                  jitter=False, shading="normals")
        image = Renderer(settings).render(camera, world)
        assert tuple(image[0, 0]) == pytest.approx((0.5, 0.5, 1.0))


class TestSettings:
    """Tests for render settings validation."""

    def test_image_height(self):
        assert RenderSettings().image_height == 225

    @pytest.mark.parametrize("kwargs", [
        {"image_width": 0},
        {"aspect_ratio": 0},
        {"aspect_ratio": 1000.0},
        {"samples_per_pixel": 0},
        {"max_depth": -1},
        {"shading": "wireframe"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)

    def test_with_quality(self):
        settings = RenderSettings(image_width=100).with_quality("draft")
        assert settings.samples_per_pixel == QUALITY_LEVELS["draft"]["samples"]
        assert settings.max_depth == QUALITY_LEVELS["draft"]["bounces"]
        assert settings.image_width == 100

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            RenderSettings().with_quality("ultra")


class TestToneMapping:
    """Tests for gamma correction and quantization."""

    def test_gamma_correct_values(self):
        linear = np.array([[[0.25, 1.0, 4.0], [-1.0, math.nan, 0.0]]])
        out = gamma_correct(linear)
        assert out.dtype == np.uint8
        assert out[0, 0].tolist() == [128, 255, 255]
        assert out[0, 1].tolist() == [0, 0, 0]

    def test_reinhard_compresses(self):
        linear = np.array([0.0, 1.0, 100.0])
        mapped = reinhard_tone_mapping(linear)
        assert mapped[0] == 0.0
        assert mapped[1] == pytest.approx(0.5)
        assert mapped[2] < 1.0


class TestImageWriter:
    """Tests for PPM and Pillow output."""

    def test_ppm_format(self):
        pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                           [[0, 0, 255], [10, 20, 30]]], dtype=np.uint8)
        stream = io.StringIO()
        write_ppm(pixels, stream)
        assert stream.getvalue() == (
            "P3\n2 2\n255\n"
            "255 0 0\n0 255 0\n"
            "0 0 255\n10 20 30\n"
        )

    def test_save_ppm(self, tmp_path):
        pixels = np.zeros((1, 3, 3), dtype=np.uint8)
        path = save_image(pixels, tmp_path / "out.ppm")
        assert path.read_text().startswith("P3\n3 1\n255\n")

    def test_save_png(self, tmp_path):
        pixels = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
        path = save_image(pixels, tmp_path / "out.png")
        with Image.open(path) as img:
            assert img.size == (2, 1)
            assert np.array_equal(np.asarray(img.convert("RGB")), pixels)
