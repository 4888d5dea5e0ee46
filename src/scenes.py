# scenes.py
"""
Demo scenes. Each builder takes the generator used for scene randomness and
returns a SceneDescription bundling the world with the camera and sampling
parameters it was composed for.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
from camera.camera import Camera
from core.vector import Vector3, Point3, Color
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.box import Box
from geometry.bvh import BVHNode
from geometry.constant_medium import ConstantMedium
from geometry.sphere import MovingSphere, Sphere
from geometry.transform import RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


@dataclass
class SceneDescription:
    world: HittableList
    lookfrom: Point3
    lookat: Point3
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    vfov: float = 40.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    samples_per_pixel: int = 100
    background: Color = field(default_factory=lambda: Color(0, 0, 0))
    time0: float = 0.0
    time1: float = 1.0

    def camera(self, aspect_ratio: Optional[float] = None) -> Camera:
        return Camera(self.lookfrom, self.lookat, self.vup, self.vfov,
                      aspect_ratio if aspect_ratio is not None else self.aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)


def random_spheres(rng: random.Random) -> SceneDescription:
    world = HittableList()
    checker = TexturePresets.checkerboard()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.polished()))

    return SceneDescription(world, Point3(13, 2, 3), Point3(0, 0, 0), vfov=20.0,
                            aperture=0.1, background=ColorPresets.SKY)


def two_spheres(rng: random.Random) -> SceneDescription:
    world = HittableList()
    checker = Lambertian(TexturePresets.checkerboard())
    world.add(Sphere(Point3(0, -10, 0), 10, checker))
    world.add(Sphere(Point3(0, 10, 0), 10, checker))
    return SceneDescription(world, Point3(13, 2, 3), Point3(0, 0, 0), vfov=20.0,
                            background=ColorPresets.SKY)


def two_perlin_spheres(rng: random.Random) -> SceneDescription:
    world = HittableList()
    marble = Lambertian(TexturePresets.marble(rng))
    world.add(Sphere(Point3(0, -1000, 0), 1000, marble))
    world.add(Sphere(Point3(0, 2, 0), 2, marble))
    return SceneDescription(world, Point3(13, 2, 3), Point3(0, 0, 0), vfov=20.0,
                            background=ColorPresets.SKY)


def earth(rng: random.Random, image_path: str = "earthmap.jpg") -> SceneDescription:
    surface = Lambertian(ImageTexture(image_path))
    world = HittableList([Sphere(Point3(0, 0, 0), 2, surface)])
    return SceneDescription(world, Point3(13, 2, 3), Point3(0, 0, 0), vfov=20.0,
                            background=ColorPresets.SKY)


def simple_light(rng: random.Random) -> SceneDescription:
    world = HittableList()
    marble = Lambertian(TexturePresets.marble(rng))
    world.add(Sphere(Point3(0, -1000, 0), 1000, marble))
    world.add(Sphere(Point3(0, 2, 0), 2, marble))

    light = LightPresets.white(4)
    world.add(XYRect(3, 5, 1, 3, -2, light))
    world.add(Sphere(Point3(0, 7, 0), 2, light))
    return SceneDescription(world, Point3(26, 3, 6), Point3(0, 2, 0), vfov=20.0,
                            samples_per_pixel=400)


def _cornell_walls(light_material, light_bounds) -> HittableList:
    world = HittableList()
    red = ColorPresets.matte(ColorPresets.CORNELL_RED)
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    green = ColorPresets.matte(ColorPresets.CORNELL_GREEN)

    world.add(YZRect(0, 555, 0, 555, 555, green))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    x0, x1, z0, z1 = light_bounds
    world.add(XZRect(x0, x1, z0, z1, 554, light_material))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(XZRect(0, 555, 0, 555, 555, white))
    world.add(XYRect(0, 555, 0, 555, 555, white))
    return world


def _cornell_blocks(white):
    box1 = Box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    box1 = Translate(RotateY(box1, 15), Vector3(265, 0, 295))
    box2 = Box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    box2 = Translate(RotateY(box2, -18), Vector3(130, 0, 65))
    return box1, box2


def _cornell_description(world: HittableList) -> SceneDescription:
    return SceneDescription(world, Point3(278, 278, -800), Point3(278, 278, 0),
                            vfov=40.0, aspect_ratio=1.0, image_width=600,
                            samples_per_pixel=200)


def cornell_box(rng: random.Random) -> SceneDescription:
    world = _cornell_walls(LightPresets.white(15), (213, 343, 227, 332))
    for block in _cornell_blocks(ColorPresets.matte(ColorPresets.CORNELL_WHITE)):
        world.add(block)
    return _cornell_description(world)


def cornell_smoke(rng: random.Random) -> SceneDescription:
    world = _cornell_walls(LightPresets.white(7), (113, 443, 127, 432))
    box1, box2 = _cornell_blocks(ColorPresets.matte(ColorPresets.CORNELL_WHITE))
    world.add(ConstantMedium(box1, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(box2, 0.01, Color(1, 1, 1)))
    return _cornell_description(world)


def final_scene(rng: random.Random, image_path: str = "earthmap.jpg") -> SceneDescription:
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes1 = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.add(Box(Point3(x0, 0, z0), Point3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode(boxes1.objects, 0, len(boxes1), 0, 1, rng))

    world.add(XZRect(123, 423, 147, 412, 554, LightPresets.white(7)))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(MovingSphere(center1, center2, 0, 1, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    haze = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(haze, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Point3(400, 200, 400), 100, Lambertian(ImageTexture(image_path))))
    world.add(Sphere(Point3(220, 280, 300), 80, Lambertian(TexturePresets.marble(rng, 0.1))))

    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    boxes2 = HittableList()
    for _ in range(1000):
        boxes2.add(Sphere(Vector3.random(rng, 0, 165), 10, white))
    cluster = BVHNode(boxes2.objects, 0, len(boxes2), 0.0, 1.0, rng)
    world.add(Translate(RotateY(cluster, 15), Vector3(-100, 270, 395)))

    return SceneDescription(world, Point3(478, 278, -600), Point3(278, 278, 0),
                            vfov=40.0, aspect_ratio=1.0, image_width=800,
                            samples_per_pixel=10000)


def two_unit_spheres(rng: random.Random) -> SceneDescription:
    """Small matte sphere at the origin resting on a large ground sphere, seen along -z."""
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, 0), 100, Lambertian(Color(0.5, 0.5, 0.6))))
    world.add(Sphere(Point3(0, 0, 0), 0.5, Lambertian(Color(0.5, 0.5, 0.5))))
    return SceneDescription(world, Point3(0, 0, 1), Point3(0, 0, 0), vfov=90.0,
                            focus_dist=1.0, background=ColorPresets.SKY)


SCENES: Dict[str, Callable[[random.Random], SceneDescription]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
    "two_unit_spheres": two_unit_spheres,
}


def build_scene(name: str, rng: random.Random) -> SceneDescription:
    """Build the registered scene `name`; raises KeyError for unknown names."""
    if name not in SCENES:
        raise KeyError(f"Unknown scene {name!r}; available: {', '.join(sorted(SCENES))}")
    scene = SCENES[name](rng)
    logger.info("Built scene %s with %d top-level objects", name, len(scene.world))
    return scene
