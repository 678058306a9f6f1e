"""Tests for OrbitCamera class"""

import math

import numpy as np
from pyrr import Vector3

from src.swimlib.core.camera import OrbitCamera


def test_camera_initialization():
    """Radius and height come from the starting offset to the target"""
    cam = OrbitCamera(Vector3([5.0, 2.0, 0.0]))

    assert np.allclose(np.asarray(cam.position), [5.0, 2.0, 0.0])
    assert cam.radius == 5.0
    assert cam.height == 2.0
    assert cam.azimuth == 0.0


def test_camera_auto_rotate():
    """Speed 0.5 is half an orbit per minute"""
    cam = OrbitCamera(Vector3([5.0, 2.0, 0.0]), auto_rotate=True, auto_rotate_speed=0.5)

    cam.update(60.0)

    assert math.isclose(cam.azimuth, math.pi)
    assert np.allclose(np.asarray(cam.position), [-5.0, 2.0, 0.0], atol=1e-9)


def test_camera_without_auto_rotate_stays_put():
    cam = OrbitCamera(Vector3([5.0, 2.0, 0.0]), auto_rotate=False)
    cam.update(10.0)

    assert np.allclose(np.asarray(cam.position), [5.0, 2.0, 0.0])


def test_camera_follows_target():
    """Moving the target keeps the orbit offset"""
    cam = OrbitCamera(Vector3([5.0, 2.0, 0.0]), auto_rotate=False)
    cam.set_target(Vector3([0.0, 1.0, 3.0]))

    assert np.allclose(np.asarray(cam.position), [5.0, 3.0, 3.0])


def test_camera_matrices():
    """Test camera matrix generation"""
    cam = OrbitCamera(Vector3([5.0, 2.0, 0.0]))

    view = cam.get_view_matrix()
    projection = cam.get_projection_matrix(16/9)

    # Should return 4x4 matrices
    assert view.shape == (4, 4)
    assert projection.shape == (4, 4)
