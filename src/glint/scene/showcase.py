"""Showcase scene exercising reflection, refraction and patterns.

The scene consists of:
- A reflective checkered floor
- A distant wall with rings
- A glass sphere (with a Fresnel-blended reflective tint) in the middle
- A striped matte sphere on the right
- A small mirror sphere on the left
- A single white point light above and to the left of the camera

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from glint.preview.export import save_image
    >>> from glint.scene.showcase import create_showcase_scene
    >>>
    >>> world, camera = create_showcase_scene(width=200, height=100)
    >>> save_image(camera.render(world), "showcase.png")
"""

import math
from dataclasses import dataclass

from glint.camera.pinhole import Camera
from glint.core.colour import Colour
from glint.core.ray import point, vector
from glint.core.transform import Transform, view_transform
from glint.materials.material import Material
from glint.materials.pattern import Pattern
from glint.scene.light import PointLight
from glint.scene.object import SceneObject
from glint.scene.world import DEFAULT_RECURSION_LIMIT, World


@dataclass
class ShowcaseParams:
    """Parameters for the showcase scene.

    Attributes:
        floor_reflectivity: Mirror weight of the checkered floor.
        glass_ior: Index of refraction of the centre sphere.
        light_position: World-space light position.
        field_of_view: Camera field of view in radians.
    """

    floor_reflectivity: float = 0.3
    glass_ior: float = 1.5
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    field_of_view: float = math.pi / 3


def create_showcase_scene(
    width: int = 400,
    height: int = 200,
    params: ShowcaseParams | None = None,
    recursion_limit: int = DEFAULT_RECURSION_LIMIT,
) -> tuple[World, Camera]:
    """Create the showcase world and a camera looking at it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        params: Optional scene parameters; defaults are used when omitted.
        recursion_limit: Reflection/refraction bounce budget.

    Returns:
        A tuple of (world, camera).
    """
    if params is None:
        params = ShowcaseParams()

    # Shifting the checkers up by half a unit keeps the y = 0 surface off
    # a cell boundary
    floor_pattern = Pattern.checkers(Colour.grey(0.35), Colour.grey(0.65)).with_transform(
        Transform().translate(0.0, 0.5, 0.0)
    )
    floor = SceneObject.plane().with_material(
        Material()
        .with_pattern(floor_pattern)
        .with_specular(0.0)
        .with_reflectivity(params.floor_reflectivity)
    )

    wall_pattern = Pattern.rings(Colour(0.55, 0.6, 0.8), Colour(0.4, 0.45, 0.7)).with_transform(
        Transform().scale(0.5, 0.5, 0.5)
    )
    wall = (
        SceneObject.plane()
        .with_transform(Transform().rotate_x(math.pi / 2).translate(0.0, 0.0, 8.0))
        .with_material(Material().with_pattern(wall_pattern).with_specular(0.0))
    )

    glass = (
        SceneObject.glass_sphere()
        .with_transform(Transform().translate(-0.5, 1.0, 0.5))
        .with_material(
            Material()
            .with_colour(Colour(0.1, 0.1, 0.15))
            .with_diffuse(0.1)
            .with_ambient(0.0)
            .with_specular(1.0)
            .with_shininess(300.0)
            .with_reflectivity(0.9)
            .with_transparency(0.9)
            .with_ior(params.glass_ior)
        )
    )

    stripes = Pattern.stripes(Colour(0.9, 0.4, 0.2), Colour(1.0, 0.85, 0.4)).with_transform(
        Transform().scale(0.2, 0.2, 0.2).rotate_z(math.pi / 4)
    )
    striped = (
        SceneObject.sphere()
        .with_transform(Transform().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5))
        .with_material(Material().with_pattern(stripes).with_diffuse(0.7).with_specular(0.3))
    )

    mirror = (
        SceneObject.sphere()
        .with_transform(Transform().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75))
        .with_material(
            Material()
            .with_colour(Colour.grey(0.1))
            .with_diffuse(0.2)
            .with_reflectivity(0.8)
        )
    )

    light = PointLight(point(*params.light_position), Colour.white())

    world = World(
        objects=(floor, wall, glass, striped, mirror),
        lights=(light,),
        recursion_limit=recursion_limit,
    )
    camera = Camera(
        hsize=width,
        vsize=height,
        field_of_view=params.field_of_view,
        transform=view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )
    return world, camera
