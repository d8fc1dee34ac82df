"""Whitted-style recursive ray tracer built on NumPy and Taichi.

This package renders scenes of spheres and planes with:
- Phong lighting with hard shadows from point lights
- Recursive reflection and refraction with Fresnel (Schlick) blending
- Procedural patterns (stripes, rings, checkers, gradients, radial sectors)
- A Taichi-backed canvas with Pillow image export

Subpackages:
    core: Points, vectors, rays, colours, transforms, intersections and shading data
    geometry: Shape primitives and the shape dispatch registry
    materials: Phong material model and procedural patterns
    scene: Lights, scene objects, the world and scene configuration
    camera: Pinhole camera that maps pixels to world rays
    preview: Canvas buffer and image export
"""

__version__ = "0.1.0"
