"""Integration tests for the showcase scene."""

import numpy as np


class TestShowcaseScene:
    """Tests for create_showcase_scene."""

    def test_scene_contents(self):
        """Test the scene has five objects, one light and the requested camera."""
        from glint.camera.pinhole import Camera
        from glint.scene.showcase import create_showcase_scene
        from glint.scene.world import World

        world, camera = create_showcase_scene(width=64, height=32)
        assert isinstance(world, World)
        assert isinstance(camera, Camera)
        assert len(world.objects) == 5
        assert len(world.lights) == 1
        assert camera.hsize == 64
        assert camera.vsize == 32

    def test_params_and_recursion_limit(self):
        """Test custom parameters reach the built scene."""
        from glint.scene.showcase import ShowcaseParams, create_showcase_scene

        params = ShowcaseParams(floor_reflectivity=0.0, glass_ior=1.33)
        world, _ = create_showcase_scene(width=8, height=4, params=params, recursion_limit=2)
        assert world.recursion_limit == 2
        assert world.objects[0].material.reflectivity == 0.0
        assert world.objects[2].material.ior == 1.33

    def test_small_render(self):
        """Test a tiny render produces finite, non-black output."""
        from glint.scene.showcase import create_showcase_scene

        world, camera = create_showcase_scene(width=8, height=4, recursion_limit=2)
        image = camera.render(world).to_numpy()
        assert image.shape == (4, 8, 3)
        assert np.all(np.isfinite(image))
        assert image.max() > 0.0
