"""Unit tests for the pinhole camera.

Tests cover:
- Pixel size for landscape and portrait images
- Ray generation through the centre and corner of the canvas
- Ray generation with a transformed camera
- Rendering a world with progress callbacks
"""

import math

import numpy as np
import pytest


class TestCameraGeometry:
    """Tests for camera construction and image-plane geometry."""

    def test_construction(self):
        """Test a camera stores its size, field of view and identity transform."""
        from glint.camera.pinhole import Camera
        from glint.core.transform import Transform

        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == pytest.approx(math.pi / 2)
        assert c.transform == Transform.identity()

    def test_pixel_size_horizontal_canvas(self):
        """Test pixel size for a landscape canvas."""
        from glint.camera.pinhole import Camera

        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        """Test pixel size for a portrait canvas."""
        from glint.camera.pinhole import Camera

        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_half_extents(self):
        """Test half width and height follow the aspect ratio."""
        from glint.camera.pinhole import Camera

        c = Camera(200, 100, math.pi / 2)
        assert c.half_width == pytest.approx(1.0)
        assert c.half_height == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "hsize,vsize,fov",
        [(0, 10, 1.0), (10, -1, 1.0), (10, 10, 0.0), (10, 10, math.pi)],
    )
    def test_invalid_parameters(self, hsize, vsize, fov):
        """Test invalid sizes and fields of view are rejected."""
        from glint.camera.pinhole import Camera

        with pytest.raises(ValueError):
            Camera(hsize, vsize, fov)

    def test_accepts_raw_matrix(self):
        """Test a raw matrix transform is wrapped into a Transform."""
        from glint.camera.pinhole import Camera
        from glint.core.transform import Transform, translation

        c = Camera(10, 10, 1.0, transform=translation(1, 2, 3))
        assert isinstance(c.transform, Transform)
        assert c.with_transform(translation(0, 0, 1)).transform == Transform(translation(0, 0, 1))


class TestRayForPixel:
    """Tests for Camera.ray_for_pixel."""

    def test_center_of_canvas(self):
        """Test the ray through the centre of the canvas."""
        from glint.camera.pinhole import Camera

        r = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert np.allclose(r.origin, [0, 0, 0, 1])
        assert np.allclose(r.direction, [0, 0, -1, 0], atol=1e-5)

    def test_corner_of_canvas(self):
        """Test the ray through the top-left corner pixel."""
        from glint.camera.pinhole import Camera

        r = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert np.allclose(r.origin, [0, 0, 0, 1])
        assert np.allclose(r.direction, [0.66519, 0.33259, -0.66851, 0], atol=1e-5)

    def test_transformed_camera(self):
        """Test a rotated and translated camera."""
        from glint.camera.pinhole import Camera
        from glint.core.transform import rotation_y, translation

        c = Camera(201, 101, math.pi / 2, transform=rotation_y(math.pi / 4) @ translation(0, -2, 5))
        r = c.ray_for_pixel(100, 50)
        s = math.sqrt(2) / 2
        assert np.allclose(r.origin, [0, 2, -5, 1])
        assert np.allclose(r.direction, [s, 0, -s, 0], atol=1e-5)


class TestRender:
    """Tests for Camera.render."""

    def test_render_default_world(self, world):
        """Test the centre pixel of a small render of the default world."""
        from glint.camera.pinhole import Camera
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.core.transform import view_transform

        c = Camera(11, 11, math.pi / 2, transform=view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))
        canvas = c.render(world)
        assert canvas.width == 11
        assert canvas.height == 11
        assert canvas.pixel_at(5, 5).isclose(Colour(0.38066, 0.47583, 0.2855), tol=1e-4)

    def test_render_progress_callback(self, world):
        """Test the callback is called once per row with increasing counts."""
        from glint.camera.pinhole import Camera

        calls = []
        Camera(4, 3, math.pi / 2).render(world, callback=lambda done, total: calls.append((done, total)))
        assert calls == [(1, 3), (2, 3), (3, 3)]

    def test_render_empty_world_is_black(self):
        """Test rendering an empty world yields a black canvas."""
        from glint.camera.pinhole import Camera
        from glint.scene.world import World

        canvas = Camera(5, 4, math.pi / 3).render(World())
        assert np.allclose(canvas.to_numpy(), 0.0)
