"""Scene configuration for loading worlds from dictionaries and JSON.

A SceneConfig is a plain-data description of a scene (camera, objects,
lights) that round-trips through JSON. build_world() and build_camera()
turn it into the immutable World and Camera used for rendering.

Transforms are lists of single-key operations applied in order:

    [{"scale": [0.5, 0.5, 0.5]}, {"rotate_y": 0.785}, {"translate": [1, 0.5, 0]}]

Example:
    >>> from glint.scene.config import SceneConfig, build_camera, build_world
    >>> config = SceneConfig.from_dict({
    ...     "camera": {"width": 100, "height": 50, "field_of_view": 1.047,
    ...                "from": [0, 1.5, -5], "to": [0, 1, 0], "up": [0, 1, 0]},
    ...     "objects": [{"shape": "sphere", "material": {"colour": [1, 0.2, 0.2]}}],
    ...     "lights": [{"position": [-10, 10, -10]}],
    ... })
    >>> world, camera = build_world(config), build_camera(config)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glint.camera.pinhole import Camera
from glint.core.colour import Colour
from glint.core.ray import point, vector
from glint.core.transform import Transform, view_transform
from glint.geometry.shapes import ShapeKind
from glint.materials.material import Material
from glint.materials.pattern import Pattern, PatternKind
from glint.scene.light import PointLight
from glint.scene.object import SceneObject
from glint.scene.world import DEFAULT_RECURSION_LIMIT, World

# Material parameters that map one-to-one onto Material fields
_MATERIAL_SCALARS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "reflectivity",
    "transparency",
    "ior",
)

_DEFAULT_CAMERA: dict[str, Any] = {
    "width": 400,
    "height": 200,
    "field_of_view": 1.0471975511965976,  # pi / 3
    "from": [0.0, 1.5, -5.0],
    "to": [0.0, 1.0, 0.0],
    "up": [0.0, 1.0, 0.0],
}


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        camera: Camera settings (width, height, field_of_view, from, to, up).
        objects: List of object configurations.
        lights: List of light configurations.
        recursion_limit: Reflection/refraction bounce budget.
    """

    camera: dict[str, Any] = field(default_factory=lambda: dict(_DEFAULT_CAMERA))
    objects: list[dict[str, Any]] = field(default_factory=list)
    lights: list[dict[str, Any]] = field(default_factory=list)
    recursion_limit: int = DEFAULT_RECURSION_LIMIT

    def to_dict(self) -> dict[str, Any]:
        """Export the configuration to a dictionary (for JSON serialization)."""
        return {
            "camera": dict(self.camera),
            "objects": list(self.objects),
            "lights": list(self.lights),
            "recursion_limit": self.recursion_limit,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneConfig:
        """Load a configuration from a dictionary.

        Missing camera keys fall back to defaults.
        """
        camera = dict(_DEFAULT_CAMERA)
        camera.update(data.get("camera", {}))
        return cls(
            camera=camera,
            objects=list(data.get("objects", [])),
            lights=list(data.get("lights", [])),
            recursion_limit=int(data.get("recursion_limit", DEFAULT_RECURSION_LIMIT)),
        )

    @classmethod
    def from_json(cls, filepath: str | Path) -> SceneConfig:
        with open(filepath, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def save_json(self, filepath: str | Path) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


# =============================================================================
# Builders
# =============================================================================


def _triple(values: Any, name: str) -> tuple[float, float, float]:
    values = list(values)
    if len(values) != 3:
        raise ValueError(f"'{name}' needs 3 values, got {values}")
    return float(values[0]), float(values[1]), float(values[2])


def build_transform(ops: list[dict[str, Any]] | None) -> Transform:
    """Build a Transform from a list of single-key operations.

    Supported operations: translate, scale (both [x, y, z]), rotate_x,
    rotate_y, rotate_z (radians), shear ([xy, xz, yx, yz, zx, zy]).

    Raises:
        ValueError: If an operation is unknown or malformed.
    """
    transform = Transform.identity()
    for op in ops or []:
        if len(op) != 1:
            raise ValueError(f"Transform operation must have exactly one key, got {op}")
        (name, args), = op.items()
        if name == "translate":
            transform = transform.translate(*_triple(args, name))
        elif name == "scale":
            transform = transform.scale(*_triple(args, name))
        elif name == "rotate_x":
            transform = transform.rotate_x(float(args))
        elif name == "rotate_y":
            transform = transform.rotate_y(float(args))
        elif name == "rotate_z":
            transform = transform.rotate_z(float(args))
        elif name == "shear":
            if len(args) != 6:
                raise ValueError(f"'shear' needs 6 values, got {args}")
            transform = transform.shear(*(float(a) for a in args))
        else:
            raise ValueError(f"Unknown transform operation: {name}")
    return transform


def build_pattern(data: dict[str, Any]) -> Pattern:
    """Build a Pattern from its configuration.

    Raises:
        ValueError: If the pattern type is unknown.
    """
    pattern_type = data.get("type", "").lower()
    try:
        kind = PatternKind[pattern_type.upper()]
    except KeyError:
        raise ValueError(f"Unknown pattern type: {pattern_type}") from None

    colours = data.get("colours", [[1.0, 1.0, 1.0], [0.0, 0.0, 0.0]])
    a = Colour.from_sequence(colours[0])
    b = Colour.from_sequence(colours[1]) if len(colours) > 1 else a

    pattern = Pattern(kind=kind, a=a, b=b, sectors=int(data.get("sectors", 4)))
    return pattern.with_transform(build_transform(data.get("transform")))


def build_material(data: dict[str, Any] | None) -> Material:
    """Build a Material; unspecified parameters keep their defaults."""
    data = data or {}
    params = {name: float(data[name]) for name in _MATERIAL_SCALARS if name in data}
    material = Material(**params)
    if "pattern" in data:
        material = material.with_pattern(build_pattern(data["pattern"]))
    elif "colour" in data:
        material = material.with_colour(Colour.from_sequence(data["colour"]))
    return material


def build_object(data: dict[str, Any]) -> SceneObject:
    """Build a SceneObject from its configuration.

    Raises:
        ValueError: If the shape is unknown.
    """
    shape_name = data.get("shape", "").lower()
    try:
        shape = ShapeKind[shape_name.upper()]
    except KeyError:
        raise ValueError(f"Unknown shape: {shape_name}") from None

    return SceneObject(
        shape=shape,
        material=build_material(data.get("material")),
        transform=build_transform(data.get("transform")),
        casts_shadow=bool(data.get("casts_shadow", True)),
    )


def build_light(data: dict[str, Any]) -> PointLight:
    if "position" not in data:
        raise ValueError("Light configuration requires a 'position'")
    colour = Colour.from_sequence(data.get("colour", [1.0, 1.0, 1.0]))
    return PointLight(point(*_triple(data["position"], "position")), colour)


def build_world(config: SceneConfig) -> World:
    """Build the World described by a configuration."""
    return World(
        objects=tuple(build_object(o) for o in config.objects),
        lights=tuple(build_light(light) for light in config.lights),
        recursion_limit=config.recursion_limit,
    )


def build_camera(config: SceneConfig) -> Camera:
    """Build the Camera described by a configuration."""
    cam = config.camera
    transform = view_transform(
        point(*_triple(cam["from"], "from")),
        point(*_triple(cam["to"], "to")),
        vector(*_triple(cam["up"], "up")),
    )
    return Camera(
        hsize=int(cam["width"]),
        vsize=int(cam["height"]),
        field_of_view=float(cam["field_of_view"]),
        transform=transform,
    )
