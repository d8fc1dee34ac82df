"""Shared fixtures for the glint test suite.

Taichi backs the canvas, so it is initialised once per session before any
canvas is created. The remaining fixtures build small scenes used across
the world, camera and shading tests.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Repeated ti.init() calls reset the runtime and invalidate fields
    held by canvases created earlier in the session.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture
def world():
    """The default two-sphere world with a single white light."""
    from glint.scene.world import default_world

    return default_world()


@pytest.fixture
def axis_ray():
    """Ray from (0, 0, -5) looking down +z through the origin."""
    from glint.core.ray import Ray, point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
